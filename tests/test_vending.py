import pytest

from handycalc.vending import Item, Payment, item_cost, total_price


@pytest.mark.parametrize("choice, cost", [(1, 30.0), (2, 20.0), (3, 25.0), (4, 15.0)])
def test_item_cost(choice, cost):
    assert item_cost(choice) == cost


@pytest.mark.parametrize("choice", [0, 5, -1])
def test_unknown_item_costs_nothing(choice):
    assert item_cost(choice) == 0.0


@pytest.mark.parametrize(
    "choice, label",
    [(1, "Soda"), (2, "Chips"), (3, "Chocolate"), (4, "Water")],
)
def test_item_labels(choice, label):
    assert Item(choice).label == label


def test_item_price_matches_item_cost():
    for item in Item:
        assert item.price == item_cost(item.value)


def test_total_price_of_one_is_price():
    assert total_price(item_cost(2), 1) == item_cost(2)


def test_total_price_scales_with_quantity():
    price = item_cost(3)
    assert total_price(price, 2) == price + price
    assert total_price(price, 0) == 0


def test_payment_in_steps():
    payment = Payment(30.0)
    remaining = payment.insert(20.0)
    assert remaining == payment.cost - payment.paid
    assert not payment.complete
    assert payment.insert(15.0) == 0.0
    assert payment.complete
    assert payment.change == pytest.approx(5.0)


def test_exact_payment_gives_no_change():
    payment = Payment(25.0)
    assert payment.insert(25.0) == 0.0
    assert payment.change == 0.0


def test_change_before_complete_raises():
    payment = Payment(15.0)
    remaining = payment.insert(10.0)
    assert remaining == pytest.approx(5.0)
    assert payment.complete is False
    with pytest.raises(ValueError):
        payment.change


def test_due_never_negative():
    payment = Payment(20.0)
    payment.insert(100.0)
    assert payment.due == 0.0
    assert payment.change == payment.paid - payment.cost
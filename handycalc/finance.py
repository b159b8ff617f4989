"""Money matters: interest, tax brackets, currency rates, trading and fuel bills."""

from __future__ import annotations

from enum import Enum

MINIMUM_PRICE = 10
TAX_FREE_LIMIT = 250_000
FIVE_PERCENT_LIMIT = 500_000
TWENTY_PERCENT_LIMIT = 1_000_000
MIDDLE_CLASS_FLOOR = 300_000
RICH_FLOOR = 1_000_000


class TaxBracket(Enum):
    """Income tax bracket, valued by its percentage rate."""

    NONE = 0
    FIVE = 5
    TWENTY = 20
    THIRTY = 30

    @property
    def rate(self) -> int:
        return self.value


class IncomeClass(Enum):
    """Coarse classification of annual income."""

    POOR = "Poor"
    MIDDLE = "Middle Class"
    RICH = "Rich"


class Currency(Enum):
    """Currencies that can be converted to INR."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    AUD = "AUD"
    JPY = "JPY"


_INR_RATES = {
    Currency.USD: 84.50,
    Currency.EUR: 92.30,
    Currency.GBP: 108.75,
    Currency.AUD: 56.40,
    Currency.JPY: 0.57,
}


class Fuel(Enum):
    """Fuel sold at the pump, valued by its price per liter in INR."""

    PETROL = 102.50
    DIESEL = 89.75

    @property
    def price(self) -> float:
        return self.value


def compound_interest(principal: float, rate: float, years: float) -> float:
    """Interest earned on ``principal`` at ``rate`` percent compounded yearly."""
    return principal * ((1 + rate / 100) ** years - 1)


def simple_interest(principal: float, rate: float, years: float) -> float:
    """Simple interest on ``principal`` at ``rate`` percent per year."""
    return principal * rate * years / 100


def tax_bracket(income: float) -> TaxBracket:
    """The tax bracket an annual income in INR falls into."""
    if income < 0:
        raise ValueError("invalid income amount")
    if income <= TAX_FREE_LIMIT:
        return TaxBracket.NONE
    if income <= FIVE_PERCENT_LIMIT:
        return TaxBracket.FIVE
    if income <= TWENTY_PERCENT_LIMIT:
        return TaxBracket.TWENTY
    return TaxBracket.THIRTY


def income_class(income: float) -> IncomeClass:
    """Classify an annual income in INR as poor, middle class or rich."""
    if income < 0:
        raise ValueError("invalid income amount")
    if income < MIDDLE_CLASS_FLOOR:
        return IncomeClass.POOR
    if income < RICH_FLOOR:
        return IncomeClass.MIDDLE
    return IncomeClass.RICH


def inr_rate(currency: Currency | str) -> float:
    """How many INR one unit of ``currency`` is worth."""
    try:
        return _INR_RATES[Currency(currency)]
    except ValueError:
        raise ValueError(f"invalid currency choice: {currency!r}") from None


def profit_or_loss(cost_price: float, selling_price: float) -> tuple[float, float]:
    """Signed gain and its percentage of the cost price.

    A positive amount is a profit, a negative one a loss; both are zero when
    the prices match.
    """
    difference = selling_price - cost_price
    if difference == 0:
        return 0.0, 0.0
    return difference, difference / cost_price * 100


def fuel_cost(fuel: Fuel, liters: float) -> float:
    """Bill in INR for ``liters`` of the given fuel."""
    return liters * Fuel(fuel).price


def can_buy(money: int, is_open: bool) -> bool:
    """True if the shop is open and the money covers the item."""
    return bool(is_open) and money >= MINIMUM_PRICE
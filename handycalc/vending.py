"""A vending machine: items, prices and payment with change."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Item(Enum):
    """Items on sale, valued by their menu number."""

    SODA = 1
    CHIPS = 2
    CHOCOLATE = 3
    WATER = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def price(self) -> float:
        return _PRICES[self]


_PRICES = {
    Item.SODA: 30.0,
    Item.CHIPS: 20.0,
    Item.CHOCOLATE: 25.0,
    Item.WATER: 15.0,
}


def item_cost(choice: int) -> float:
    """Price of the item with the given menu number; zero for an unknown choice."""
    try:
        return Item(choice).price
    except ValueError:
        return 0.0


def total_price(price: float, quantity: int) -> float:
    """Cost of ``quantity`` items at ``price`` each."""
    return price * quantity


@dataclass
class Payment:
    """Money collected towards a purchase of a fixed cost."""

    cost: float
    paid: float = 0.0

    def insert(self, amount: float) -> float:
        """Add money and return how much is still due."""
        self.paid += amount
        return self.due

    @property
    def due(self) -> float:
        """Amount still to be paid, never negative."""
        return max(self.cost - self.paid, 0.0)

    @property
    def complete(self) -> bool:
        """True once the money paid covers the cost."""
        return self.paid >= self.cost

    @property
    def change(self) -> float:
        """Money to return once the payment is complete."""
        if not self.complete:
            raise ValueError(f"insufficient funds, {self.cost - self.paid:.2f} more needed")
        return self.paid - self.cost
"""Product aggregate.

A product carries its own stock count. The catalog owns the live
products; carts and orders only ever hold snapshot copies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock`` is never negative
    - ``price`` is never negative (guaranteed by ``Money``)
    """

    id: int
    name: str
    price: Money
    stock: int = 0

    def __post_init__(self) -> None:
        if not _is_count(self.stock):
            raise ValidationError(f"Stock must be an integer, got {self.stock!r}")
        if self.stock < 0:
            raise ValidationError(f"Stock can't be negative, got {self.stock}")

    def set_price(self, new_price: Money) -> None:
        """Change the product price.

        Lines already in a cart or an order keep the price they were
        added at.
        """
        if new_price.amount < 0:
            raise ValidationError("Price can't be negative")
        self.price = new_price

    def set_stock(self, stock: int) -> None:
        if not _is_count(stock):
            raise ValidationError(f"Stock must be an integer, got {stock!r}")
        if stock < 0:
            raise ValidationError("Stock can't be negative")
        self.stock = stock

    def reduce_stock(self, qty: int) -> bool:
        """Take *qty* units out of stock.

        Returns False, leaving stock untouched, when *qty* is not a
        positive int or exceeds what is on hand.
        """
        if not _is_count(qty) or qty <= 0:
            return False
        if qty > self.stock:
            return False
        self.stock -= qty
        return True

    def increase_stock(self, qty: int) -> None:
        if _is_count(qty) and qty > 0:
            self.stock += qty

    def snapshot(self) -> Product:
        return replace(self)

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} - {self.price} (stock: {self.stock})"


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

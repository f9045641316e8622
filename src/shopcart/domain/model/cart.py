"""Cart aggregate and its lines."""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartLine:
    """A product snapshot and how many units of it were added.

    The snapshot is taken when the line is created, so later catalog
    price changes never reach an existing line.
    """

    product: Product
    quantity: Quantity

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Ordered lines held by one shopper.

    ``add_line`` does not look at live stock: the caller must already have
    taken the units out of the catalog with ``Catalog.reduce_stock``.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def add_line(self, product: Product, qty: int) -> CartLine:
        line = CartLine(product=product.snapshot(), quantity=Quantity(qty))
        self._lines.append(line)
        return line

    def remove_line(self, product_id: int) -> CartLine:
        """Remove the most recently added line for *product_id*."""
        for index in range(len(self._lines) - 1, -1, -1):
            if self._lines[index].product.id == product_id:
                return self._lines.pop(index)
        raise EntityNotFoundError(f"Product #{product_id} is not in the cart")

    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.subtotal
        return result

    def clear(self) -> None:
        self._lines.clear()

    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

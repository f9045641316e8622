"""Order — the immutable receipt of a completed checkout."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import CartLine
from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """Snapshot of a cart's lines at the moment payment succeeded.

    Use the ``Order.create()`` factory: it copies the lines and computes
    the total once, so nothing that happens to the cart afterwards can
    change the receipt.
    """

    id: int
    lines: tuple[CartLine, ...]
    total: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(order_id: int, lines: list[CartLine] | tuple[CartLine, ...]) -> Order:
        if not lines:
            raise ValidationError("Order must contain at least one line")

        lines = tuple(lines)
        total = Money.zero()
        for line in lines:
            total = total + line.subtotal
        return Order(id=order_id, lines=lines, total=total)

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

"""Process-lifetime implementation of OrderRepository."""

from __future__ import annotations

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.order import Order
from shopcart.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._last_id = 0

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return [self._store[order_id] for order_id in sorted(self._store)]

    def save(self, order: Order) -> None:
        if order.id in self._store:
            raise ValidationError(f"Order #{order.id} already exists")
        self._store[order.id] = order

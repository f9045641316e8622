"""Abstract repository for Order receipts.

Defined in the domain layer so the domain never depends on
infrastructure. Orders are append-only: once saved they are never
updated or removed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next order ID (1, 2, 3, ...)."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order."""

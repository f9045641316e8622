"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.cart import CartLine
from shopcart.domain.model.order import Order
from shopcart.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: one catalog entry as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$10.50"
    stock: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            stock=product.stock,
        )


@dataclass(frozen=True)
class LineDTO:
    """Output: a cart or order line."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str

    @staticmethod
    def from_line(line: CartLine) -> LineDTO:
        return LineDTO(
            product_id=line.product.id,
            product_name=line.product.name,
            quantity=line.quantity.value,
            unit_price=str(line.product.price),
            subtotal=str(line.subtotal),
        )


@dataclass(frozen=True)
class CartDTO:
    lines: list[LineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderDTO:
    """Output: a completed order as displayed to the user."""

    id: int
    lines: list[LineDTO]
    total: str
    created_at: str
    item_count: int
    payment_method: str = ""

    @staticmethod
    def from_order(order: Order, payment_method: str = "") -> OrderDTO:
        return OrderDTO(
            id=order.id,
            lines=[LineDTO.from_line(line) for line in order.lines],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            item_count=order.item_count,
            payment_method=payment_method,
        )

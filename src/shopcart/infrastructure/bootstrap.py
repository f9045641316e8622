"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
A ``ShopContext`` holds everything one shopping session shares; it is
built here and handed to the CLI, never stored in a global.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.catalog import Catalog
from shopcart.domain.model.product import Product
from shopcart.domain.model.user import Role, User
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.infrastructure.persistence.flat_file_exporter import FlatFileExporter
from shopcart.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

DEFAULT_EXPORT_FILE = Path("inventory.txt")

# (id, name, price, stock) rows each seed catalog starts with.
SEED_CATALOGS: dict[str, list[tuple[int, str, str, int]]] = {
    "classic": [
        (1, "Book", "10.50", 10),
        (2, "Pen", "2.50", 20),
        (3, "Laptop", "800.00", 5),
    ],
    "electronics": [
        (1, "Mouse", "15.00", 10),
        (2, "Keyboard", "25.00", 5),
    ],
}
DEFAULT_SEED = "classic"


@dataclass
class ShopContext:
    catalog: Catalog
    user: User
    cart: Cart = field(default_factory=Cart)
    order_repo: OrderRepository = field(default_factory=InMemoryOrderRepository)


def catalog(seed: str = DEFAULT_SEED) -> Catalog:
    return Catalog(
        [
            Product(id=pid, name=name, price=Money.of(price), stock=stock)
            for pid, name, price, stock in SEED_CATALOGS[seed]
        ]
    )


def shop_context(
    name: str = "Guest",
    email: str = "",
    admin: bool = False,
    seed: str = DEFAULT_SEED,
) -> ShopContext:
    user = User(name=name, email=email, role=Role.ADMIN if admin else Role.GUEST)
    return ShopContext(catalog=catalog(seed), user=user)


def catalog_exporter(file_path: Path = DEFAULT_EXPORT_FILE) -> FlatFileExporter:
    return FlatFileExporter(file_path)

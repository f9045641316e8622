"""Catalog aggregate — the authoritative product id -> product mapping.

One Catalog is created per session by the composition root and passed
explicitly to every use case that needs it. Callers are trusted to use
it from a single thread.

``reduce_stock`` is the only way stock leaves the catalog for a cart,
which is what keeps stock counts from ever going negative.
"""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class Catalog:

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[int, Product] = {}
        for product in products or []:
            self.add(product)

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: int) -> Product:
        """Return a snapshot of the product.

        Raises EntityNotFoundError if no product has this id.
        """
        return self._require(product_id).snapshot()

    def has_product(self, product_id: int) -> bool:
        return product_id in self._products

    def list_all(self) -> list[Product]:
        """Return snapshots of every product, ordered by id."""
        return [
            self._products[product_id].snapshot()
            for product_id in sorted(self._products)
        ]

    def __len__(self) -> int:
        return len(self._products)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> None:
        """Insert the product, replacing any existing entry with its id."""
        self._products[product.id] = product.snapshot()
        logger.info("Catalog entry %s set: %s", product.id, product.name)

    def reduce_stock(self, product_id: int, qty: int) -> bool:
        product = self._products.get(product_id)
        if product is None:
            logger.warning("Stock reduction refused: unknown product %s", product_id)
            return False
        if not product.reduce_stock(qty):
            logger.warning(
                "Stock reduction refused for %s: asked %s, have %s",
                product.name, qty, product.stock,
            )
            return False
        logger.info("Reduced %s stock by %s to %s", product.name, qty, product.stock)
        return True

    def increase_stock(self, product_id: int, qty: int) -> None:
        product = self._require(product_id)
        product.increase_stock(qty)
        logger.info("Stock of %s is now %s", product.name, product.stock)

    def set_price(self, product_id: int, price: Money) -> None:
        self._require(product_id).set_price(price)

    def set_stock(self, product_id: int, stock: int) -> None:
        self._require(product_id).set_stock(stock)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

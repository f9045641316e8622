"""Application service: Remove From Cart use case."""

from __future__ import annotations

import logging

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.catalog import Catalog

logger = logging.getLogger(__name__)


class RemoveFromCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_id: int) -> int:
        """Drop the latest cart line for a product and restock it.

        Returns the number of units given back to the catalog.
        """
        line = self._cart.remove_line(product_id)
        qty = line.quantity.value
        self._catalog.increase_stock(product_id, qty)
        logger.info("Removed %s x%s from cart", line.product.name, qty)
        return qty

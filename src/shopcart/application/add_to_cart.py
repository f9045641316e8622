"""Application service: Add To Cart use case.

Stock is taken out of the catalog *before* the line is appended, and is
not given back if the cart is later abandoned or payment fails. Only
``RemoveFromCartHandler`` returns units to the catalog.
"""

from __future__ import annotations

import logging

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.catalog import Catalog

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_id: int, quantity: int) -> bool:
        """Move *quantity* units of a product from the catalog into the cart.

        Returns False, adding nothing, when the catalog refuses the stock
        reduction (quantity not a positive int, or not enough stock). Raises
        EntityNotFoundError for an unknown product.
        """
        product = self._catalog.get(product_id)

        if not self._catalog.reduce_stock(product_id, quantity):
            return False

        # Snapshot after the reduction so the line reflects current state
        self._cart.add_line(self._catalog.get(product_id), quantity)
        logger.info("Added %s x%s to cart", product.name, quantity)
        return True

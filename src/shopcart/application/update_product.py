"""Application service: Update Product use case (admin setters)."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.domain.model.catalog import Catalog
from shopcart.domain.model.value_objects import Money


class UpdateProductHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        product_id: int,
        new_price: str | None = None,
        new_stock: int | None = None,
    ) -> ProductDTO:
        """Change a product's price and/or stock.

        Negative values raise ValidationError and leave the product
        untouched. Lines already in a cart or an order keep the price
        they captured.
        """
        # Money rejects negatives on construction, so both values are
        # validated before anything is applied.
        price = Money.of(new_price) if new_price is not None else None

        if new_stock is not None:
            self._catalog.set_stock(product_id, new_stock)
        if price is not None:
            self._catalog.set_price(product_id, price)

        return ProductDTO.from_product(self._catalog.get(product_id))

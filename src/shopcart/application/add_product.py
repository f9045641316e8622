"""Application service: Add Product use case."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.catalog import Catalog
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money


class AddProductHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, product_id: int, name: str, price: str, stock: int) -> ProductDTO:
        """Add a product to the catalog, replacing any product with the same ID."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product = Product(
            id=product_id, name=name.strip(), price=Money.of(price), stock=stock
        )
        self._catalog.add(product)
        return ProductDTO.from_product(product)

"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.domain.model.catalog import Catalog


class ListProductsHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._catalog.list_all()]

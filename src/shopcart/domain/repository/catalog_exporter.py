"""Abstract sink that a catalog can be dumped into."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Product


class CatalogExporter(ABC):

    @abstractmethod
    def export(self, products: list[Product]) -> int:
        """Write *products* out and return how many were written."""

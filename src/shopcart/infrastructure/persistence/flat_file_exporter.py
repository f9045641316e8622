"""Flat-file dump of the catalog.

One line per product, ``id,name,price,stock``, no header. Names are
written as-is, so a comma inside a name is not escaped.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shopcart.domain.model.product import Product
from shopcart.domain.repository.catalog_exporter import CatalogExporter

logger = logging.getLogger(__name__)


class FlatFileExporter(CatalogExporter):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def export(self, products: list[Product]) -> int:
        """Write *products* to the file, replacing its contents."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            "".join(self._to_line(p) for p in products), encoding="utf-8"
        )
        logger.info("Exported %d products to %s", len(products), self._file_path)
        return len(products)

    @staticmethod
    def _to_line(product: Product) -> str:
        return f"{product.id},{product.name},{product.price.plain()},{product.stock}\n"

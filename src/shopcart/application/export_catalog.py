"""Application service: Export Catalog use case."""

from __future__ import annotations

from shopcart.domain.model.catalog import Catalog
from shopcart.domain.repository.catalog_exporter import CatalogExporter


class ExportCatalogHandler:

    def __init__(self, catalog: Catalog, exporter: CatalogExporter) -> None:
        self._catalog = catalog
        self._exporter = exporter

    def handle(self) -> int:
        """Dump every product to the exporter's file; return how many."""
        return self._exporter.export(self._catalog.list_all())

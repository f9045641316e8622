"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from shopcart.application.export_catalog import ExportCatalogHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.infrastructure.bootstrap import (
    DEFAULT_EXPORT_FILE,
    ShopContext,
    catalog_exporter,
)
from shopcart.infrastructure.cli.display import echo_products


@click.command("products")
@click.pass_obj
def products(context: ShopContext) -> None:
    """List all products in the catalog."""
    echo_products(ListProductsHandler(context.catalog).handle())


@click.command("export")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_EXPORT_FILE,
    show_default=True,
    envvar="SHOPCART_EXPORT_FILE",
    help="File to write 'id,name,price,stock' lines to.",
)
@click.pass_obj
def export(context: ShopContext, output: Path) -> None:
    """Dump the catalog to a flat file."""
    handler = ExportCatalogHandler(context.catalog, catalog_exporter(output))
    count = handler.handle()
    click.echo(f"Exported {count} products to {output}")

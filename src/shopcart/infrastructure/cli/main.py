import click

from shopcart.infrastructure import bootstrap
from shopcart.infrastructure.cli.catalog_commands import export, products
from shopcart.infrastructure.cli.shop_commands import demo, shop
from shopcart.infrastructure.logging_config import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option("--user", "user_name", default="Guest", show_default=True, envvar="SHOPCART_USER", help="Shopper name.")
@click.option("--email", default="", envvar="SHOPCART_EMAIL", help="Shopper e-mail (PayPal default).")
@click.option("--admin", is_flag=True, default=False, envvar="SHOPCART_ADMIN", help="Enable catalog administration.")
@click.option(
    "--seed",
    type=click.Choice(sorted(bootstrap.SEED_CATALOGS)),
    default=bootstrap.DEFAULT_SEED,
    show_default=True,
    envvar="SHOPCART_SEED",
    help="Catalog the session starts with.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SHOPCART_LOG_LEVEL",
    help="Verbosity of the log written to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    user_name: str,
    email: str,
    admin: bool,
    seed: str,
    log_level: str,
) -> None:
    """Shopcart — console shopping cart"""
    configure_logging(log_level)
    ctx.obj = bootstrap.shop_context(name=user_name, email=email, admin=admin, seed=seed)


# Register subcommands
cli.add_command(demo)
cli.add_command(export)
cli.add_command(products)
cli.add_command(shop)

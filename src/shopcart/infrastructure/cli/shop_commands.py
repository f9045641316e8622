"""CLI commands that run a shopping session."""

from __future__ import annotations

import click

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.checkout import CheckoutHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.view_cart import ViewCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.service.payment import CardPayment
from shopcart.infrastructure.bootstrap import ShopContext
from shopcart.infrastructure.cli.display import echo_cart, echo_order, echo_products
from shopcart.infrastructure.cli.menu import ShopMenu


@click.command("shop")
@click.pass_obj
def shop(context: ShopContext) -> None:
    """Start the interactive shopping menu."""
    ShopMenu(context).run()


@click.command("demo")
@click.option("--product", "product_id", default=1, show_default=True, type=int, help="Product ID to buy.")
@click.option("--quantity", default=2, show_default=True, type=int, help="Units to buy.")
@click.option("--card", "card_number", default="1234", show_default=True, help="Card number to pay with.")
@click.pass_obj
def demo(context: ShopContext, product_id: int, quantity: int, card_number: str) -> None:
    """Run a scripted purchase: list, add to cart, pay by card."""
    click.echo(f"Welcome {context.user}")
    echo_products(ListProductsHandler(context.catalog).handle())

    try:
        added = AddToCartHandler(context.catalog, context.cart).handle(product_id, quantity)
        if not added:
            raise click.ClickException(
                f"Could not add {quantity} x product #{product_id} to cart"
            )
        cart = ViewCartHandler(context.cart).handle()
        click.echo(f"Cart total: {cart.total}")

        payment = CardPayment(card_number, context.user.name)
        order = CheckoutHandler(context.cart, context.order_repo).handle(payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_order(order)
    echo_cart(ViewCartHandler(context.cart).handle())

"""Console formatting shared by the CLI commands and the menu."""

from __future__ import annotations

import click

from shopcart.application.dto import CartDTO, OrderDTO, ProductDTO


def echo_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>7}")


def echo_cart(cart: CartDTO) -> None:
    if cart.is_empty:
        click.echo("Cart is empty.")
        return

    for line in cart.lines:
        click.echo(f"{line.product_name} x{line.quantity} = {line.subtotal}")
    click.echo(f"Total: {cart.total}")


def echo_order(order: OrderDTO) -> None:
    click.echo(f"Order #{order.id} Summary:")
    if order.payment_method:
        click.echo(f"Paid with: {order.payment_method}")
    for line in order.lines:
        click.echo(f"  {line.product_name} x{line.quantity} = {line.subtotal}")
    click.echo(f"Items: {order.item_count}")
    click.echo(f"Total: {order.total}")

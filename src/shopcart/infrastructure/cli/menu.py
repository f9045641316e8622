"""Interactive text menu driving one shopping session.

The menu only reads input and prints results; every state change goes
through an application handler.
"""

from __future__ import annotations

from pathlib import Path

import click

from shopcart.application.add_product import AddProductHandler
from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.checkout import CheckoutHandler
from shopcart.application.export_catalog import ExportCatalogHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.remove_from_cart import RemoveFromCartHandler
from shopcart.application.show_order import ShowOrderHandler
from shopcart.application.update_product import UpdateProductHandler
from shopcart.application.view_cart import ViewCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.service.payment import CardPayment, Payment, PayPalPayment
from shopcart.infrastructure.bootstrap import (
    DEFAULT_EXPORT_FILE,
    ShopContext,
    catalog_exporter,
)
from shopcart.infrastructure.cli.display import echo_cart, echo_order, echo_products

SHOPPER_ENTRIES = [
    (1, "Show Products"),
    (2, "Add to Cart"),
    (3, "View Cart"),
    (4, "Checkout"),
    (5, "Remove from Cart"),
    (6, "Order History"),
    (7, "Show Order"),
]
ADMIN_ENTRIES = [
    (8, "Add Product"),
    (9, "Set Price"),
    (10, "Set Stock"),
    (11, "Export Catalog"),
]
EXIT_CHOICE = 0


class ShopMenu:

    def __init__(self, context: ShopContext) -> None:
        self._ctx = context
        self._entries = list(SHOPPER_ENTRIES)
        if context.user.is_admin:
            self._entries += ADMIN_ENTRIES
        self._actions = {
            1: self.show_products,
            2: self.add_to_cart,
            3: self.view_cart,
            4: self.checkout,
            5: self.remove_from_cart,
            6: self.order_history,
            7: self.show_order,
            8: self.add_product,
            9: self.set_price,
            10: self.set_stock,
            11: self.export_catalog,
        }

    def run(self) -> None:
        click.echo(f"Welcome, {self._ctx.user}")

        allowed = {number for number, _ in self._entries}
        while True:
            click.echo()
            for number, label in self._entries:
                click.echo(f"{number}. {label}")
            click.echo(f"{EXIT_CHOICE}. Exit")

            choice = click.prompt("Choice", type=int)
            if choice == EXIT_CHOICE:
                click.echo("Goodbye!")
                return
            if choice not in allowed:
                click.echo("Unknown choice.")
                continue

            try:
                self._actions[choice]()
            except DomainException as exc:
                click.echo(f"Error: {exc}")

    # --- Shopper actions ------------------------------------------------------

    def show_products(self) -> None:
        echo_products(ListProductsHandler(self._ctx.catalog).handle())

    def add_to_cart(self) -> None:
        product_id = click.prompt("Product id", type=int)
        quantity = click.prompt("Quantity", type=int)

        handler = AddToCartHandler(self._ctx.catalog, self._ctx.cart)
        if handler.handle(product_id, quantity):
            click.echo(f"Added {quantity} x product #{product_id} to cart.")
        else:
            click.echo("Could not add to cart: invalid quantity or not enough stock.")

    def view_cart(self) -> None:
        echo_cart(ViewCartHandler(self._ctx.cart).handle())

    def checkout(self) -> None:
        # Refuse before asking for payment details
        if self._ctx.cart.is_empty():
            click.echo("Cart is empty!")
            return

        payment = self._choose_payment()
        handler = CheckoutHandler(self._ctx.cart, self._ctx.order_repo)
        echo_order(handler.handle(payment))

    def remove_from_cart(self) -> None:
        product_id = click.prompt("Product id", type=int)
        returned = RemoveFromCartHandler(self._ctx.catalog, self._ctx.cart).handle(
            product_id
        )
        click.echo(f"Removed product #{product_id}; {returned} returned to stock.")

    def order_history(self) -> None:
        orders = ShowOrderHandler(self._ctx.order_repo).handle_all()
        if not orders:
            click.echo("No orders yet.")
            return
        for order in orders:
            echo_order(order)

    def show_order(self) -> None:
        order_id = click.prompt("Order id", type=int)
        echo_order(ShowOrderHandler(self._ctx.order_repo).handle(order_id))

    # --- Admin actions --------------------------------------------------------

    def add_product(self) -> None:
        product_id = click.prompt("Product id", type=int)
        name = click.prompt("Name")
        price = click.prompt("Price")
        stock = click.prompt("Stock", type=int)

        product = AddProductHandler(self._ctx.catalog).handle(product_id, name, price, stock)
        click.echo(f"Product #{product.id} '{product.name}' set at {product.price}")

    def set_price(self) -> None:
        product_id = click.prompt("Product id", type=int)
        price = click.prompt("New price")

        product = UpdateProductHandler(self._ctx.catalog).handle(product_id, new_price=price)
        click.echo(f"Product #{product.id} price updated to {product.price}")

    def set_stock(self) -> None:
        product_id = click.prompt("Product id", type=int)
        stock = click.prompt("New stock", type=int)

        product = UpdateProductHandler(self._ctx.catalog).handle(product_id, new_stock=stock)
        click.echo(f"Product #{product.id} stock set to {product.stock}")

    def export_catalog(self) -> None:
        path = click.prompt("File", default=str(DEFAULT_EXPORT_FILE))
        handler = ExportCatalogHandler(self._ctx.catalog, catalog_exporter(Path(path)))
        count = handler.handle()
        click.echo(f"Exported {count} products to {path}")

    # --- Internal helpers -----------------------------------------------------

    def _choose_payment(self) -> Payment:
        method = click.prompt("1. Card 2. PayPal", type=click.IntRange(1, 2))
        user = self._ctx.user
        if method == 1:
            card_number = click.prompt("Card number", default="", show_default=False)
            name_on_card = click.prompt("Name on card", default=user.name)
            return CardPayment(card_number, name_on_card)
        email = click.prompt("PayPal e-mail", default=user.email, show_default=bool(user.email))
        return PayPalPayment(email)

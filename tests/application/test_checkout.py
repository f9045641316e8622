"""Integration tests for the Checkout use case.

Uses the in-memory order repository and a recording payment fake.
"""

import pytest

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.checkout import CheckoutHandler
from shopcart.domain.exceptions import EmptyCartError, PaymentDeclinedError, ValidationError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.catalog import Catalog
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.service.payment import CardPayment, PayPalPayment
from shopcart.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from tests.fakes import FakePayment


def _setup():
    catalog = Catalog([
        Product(id=1, name="Book", price=Money.of("10.50"), stock=10),
        Product(id=2, name="Pen", price=Money.of("2.50"), stock=20),
    ])
    cart = Cart()
    order_repo = InMemoryOrderRepository()
    return catalog, cart, order_repo, AddToCartHandler(catalog, cart), CheckoutHandler(cart, order_repo)


class TestCheckoutHappyPath:

    def test_book_example(self):
        catalog, cart, order_repo, add, checkout = _setup()

        assert add.handle(1, 3) is True
        assert catalog.get(1).stock == 7
        assert str(cart.total()) == "$31.50"

        payment = FakePayment()
        dto = checkout.handle(payment)

        assert dto.id == 1
        assert dto.total == "$31.50"
        assert payment.charges == [Money.of("31.50")]
        assert cart.is_empty()
        assert order_repo.get_by_id(1).total == Money.of("31.50")

    def test_order_ids_increase_from_one(self):
        _, _, _, add, checkout = _setup()
        ids = []
        for _ in range(3):
            add.handle(2, 1)
            ids.append(checkout.handle(FakePayment()).id)
        assert ids == [1, 2, 3]

    def test_order_keeps_lines_after_cart_cleared(self):
        _, cart, order_repo, add, checkout = _setup()
        add.handle(1, 1)
        add.handle(2, 4)
        checkout.handle(FakePayment())

        order = order_repo.get_by_id(1)
        assert [(l.product.name, l.quantity.value) for l in order.lines] == [("Book", 1), ("Pen", 4)]
        assert order.total == Money.of("20.50")

    def test_checkout_does_not_touch_stock(self):
        catalog, _, _, add, checkout = _setup()
        add.handle(1, 3)
        checkout.handle(FakePayment())
        assert catalog.get(1).stock == 7

    def test_real_payment_methods(self):
        _, _, _, add, checkout = _setup()
        add.handle(1, 1)
        assert checkout.handle(CardPayment("1234", "Alice")).payment_method == "Credit Card"
        add.handle(1, 1)
        assert checkout.handle(PayPalPayment("alice@mail.com")).id == 2


class TestCheckoutEmptyCart:

    def test_rejected_without_calling_payment(self):
        _, _, order_repo, _, checkout = _setup()
        payment = FakePayment()

        with pytest.raises(EmptyCartError, match="Cart is empty"):
            checkout.handle(payment)

        assert not payment.was_called
        assert order_repo.list_all() == []

    def test_empty_cart_error_is_a_validation_error(self):
        _, _, _, _, checkout = _setup()
        with pytest.raises(ValidationError):
            checkout.handle(FakePayment())


class TestCheckoutPaymentDeclined:

    def test_cart_and_stock_unchanged(self):
        catalog, cart, order_repo, add, checkout = _setup()
        add.handle(1, 3)
        lines_before = cart.lines

        with pytest.raises(PaymentDeclinedError, match="declined"):
            checkout.handle(FakePayment(approve=False))

        assert cart.lines == lines_before
        assert catalog.get(1).stock == 7
        assert order_repo.list_all() == []

    def test_declined_payment_does_not_consume_an_id(self):
        _, _, _, add, checkout = _setup()
        add.handle(1, 1)
        with pytest.raises(PaymentDeclinedError):
            checkout.handle(CardPayment("", "Alice"))

        assert checkout.handle(FakePayment()).id == 1

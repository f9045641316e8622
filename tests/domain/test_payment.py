"""Unit tests for the payment stubs."""

from shopcart.domain.model.value_objects import Money
from shopcart.domain.service.payment import CardPayment, PayPalPayment


class TestCardPayment:

    def test_accepts_with_card_number(self):
        assert CardPayment("1234", "Alice").pay(Money.of("30")) is True

    def test_refuses_without_card_number(self):
        assert CardPayment("", "Alice").pay(Money.of("30")) is False

    def test_method_label(self):
        assert CardPayment("1", "A").method == "Credit Card"


class TestPayPalPayment:

    def test_accepts_with_email(self):
        assert PayPalPayment("alice@mail.com").pay(Money.of("30")) is True

    def test_refuses_without_email(self):
        assert PayPalPayment("").pay(Money.of("30")) is False

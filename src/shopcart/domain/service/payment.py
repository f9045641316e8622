"""Domain service: Payment authorization.

Both payment methods are stubs: no gateway is contacted. A method
accepts a charge as long as its credentials are present, and reports
the outcome as a boolean so checkout can decide what to do with the
cart.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from shopcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class Payment(ABC):

    method: str = ""

    @abstractmethod
    def pay(self, amount: Money) -> bool:
        """Charge *amount*; return True if the payment was accepted."""


class CardPayment(Payment):

    method = "Credit Card"

    def __init__(self, card_number: str, name_on_card: str) -> None:
        self._card_number = card_number
        self._name_on_card = name_on_card

    def pay(self, amount: Money) -> bool:
        logger.info("Processing credit card payment for %s", amount)
        if not self._card_number:
            logger.warning("Credit card payment refused: no card number")
            return False
        logger.info("Paid %s by credit card (%s)", amount, self._name_on_card)
        return True


class PayPalPayment(Payment):

    method = "PayPal"

    def __init__(self, account_email: str) -> None:
        self._account_email = account_email

    def pay(self, amount: Money) -> bool:
        logger.info("Processing PayPal payment for %s", amount)
        if not self._account_email:
            logger.warning("PayPal payment refused: no account email")
            return False
        logger.info("Paid %s by PayPal (%s)", amount, self._account_email)
        return True

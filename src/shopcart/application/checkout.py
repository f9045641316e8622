"""Application service: Checkout use case.

Coordinates the cart, the payment method and the order repository:

    cart non-empty -> payment requested
        -> accepted: order created, cart cleared
        -> refused:  cart left exactly as it was

Stock is not checked again here; it was already taken from the catalog
when each line was added.
"""

from __future__ import annotations

import logging

from shopcart.application.dto import OrderDTO
from shopcart.domain.exceptions import EmptyCartError, PaymentDeclinedError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.order import Order
from shopcart.domain.repository.order_repository import OrderRepository
from shopcart.domain.service.payment import Payment

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, cart: Cart, order_repo: OrderRepository) -> None:
        self._cart = cart
        self._order_repo = order_repo

    def handle(self, payment: Payment) -> OrderDTO:
        """Charge the cart total and turn the cart into an order.

        Raises:
            EmptyCartError: the cart has no lines; *payment* is not called.
            PaymentDeclinedError: *payment* returned False; no order is
                created and the cart keeps its lines.
        """
        if self._cart.is_empty():
            raise EmptyCartError("Cart is empty!")

        amount = self._cart.total()
        logger.info("Requesting %s payment of %s", payment.method, amount)

        if not payment.pay(amount):
            logger.warning("%s payment of %s declined", payment.method, amount)
            raise PaymentDeclinedError(f"{payment.method} payment of {amount} was declined")

        # Ids are allocated only for paid orders
        order = Order.create(order_id=self._order_repo.next_id(), lines=self._cart.lines)
        self._order_repo.save(order)
        self._cart.clear()

        logger.info("Order #%s created for %s", order.id, order.total)
        return OrderDTO.from_order(order, payment_method=payment.method)

"""Application service: View Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO, LineDTO
from shopcart.domain.model.cart import Cart


class ViewCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[LineDTO.from_line(line) for line in self._cart.lines],
            total=str(self._cart.total()),
        )

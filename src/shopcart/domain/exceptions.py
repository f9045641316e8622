"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Running out of stock is deliberately *not* an exception: the catalog
signals it by returning False from ``reduce_stock``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument was invalid or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart with no lines."""


class PaymentDeclinedError(DomainException):
    """The payment method refused the charge; nothing was changed."""

"""Domain-level exceptions.

All storefront errors are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UsageError(DomainException):
    """A checkout was requested in a state that does not allow it."""


class EmptyCartError(UsageError):

    def __init__(self, message: str = "Cart is empty") -> None:
        super().__init__(message)


class CheckoutInProgressError(UsageError):

    def __init__(self, message: str = "Checkout already in progress") -> None:
        super().__init__(message)


class SubmissionError(DomainException):
    """The order-creation endpoint did not record the order."""


class CatalogUnavailableError(DomainException):
    """The catalog service could not answer a query."""


class NavigationError(DomainException):
    """No navigation strategy could open the deep link."""

"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or catalog invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidProductError(DomainException):
    """A pricing configuration is structurally incomplete.

    Raised when the product's pricing is missing, or lacks ``base_price``
    or ``dimensions``. This is a caller contract error: no price may be
    shown for the product.
    """

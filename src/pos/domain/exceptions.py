"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateIdError(ValidationError):
    """An entity with the requested identifier already exists."""


class InvalidPriceError(ValidationError):
    """A price is not a finite, non-negative number."""


class InvalidQuantityError(ValidationError):
    """A quantity is not a positive integer."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

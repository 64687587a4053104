"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API and CLI layers can catch them uniformly and report a clean
message instead of a traceback.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument broke a business rule (e.g. a non-positive count)."""


class BusinessHoursError(DomainException):
    """An operation was attempted while the shop is closed."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

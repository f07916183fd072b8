class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UniquenessViolation(ValidationError):
    """Raised when a write hits a UNIQUE constraint (e.g. duplicate team name)."""


class NotFoundError(DomainError):
    """Raised when an id does not resolve to a row."""


class InactiveEmployeeError(DomainError):
    """Raised when presence is set on an employee that is not active."""

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StaffNotFoundError(DomainError):
    """Raised when no staff entry carries the requested id."""

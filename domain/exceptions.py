"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class ParseError(ValidationError):
    """Raised when text cannot be parsed into a domain value."""


class AggregateNotFoundError(DomainError):
    """Raised when an aggregate is not found in the repository."""

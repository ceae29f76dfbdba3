"""Domain layer exports."""

from domain.exceptions import AggregateNotFoundError, DomainError, ParseError, ValidationError
from domain.value_objects import EntityId

__all__ = [
    "AggregateNotFoundError",
    "DomainError",
    "EntityId",
    "ParseError",
    "ValidationError",
]

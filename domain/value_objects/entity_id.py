"""Typed entity identifier backed by a UUID."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, field_validator

from domain.exceptions import ParseError, ValidationError

NIL_UUID = UUID(int=0)


class EntityId(BaseModel):
    """Typed identifier for domain entities.

    Thin immutable wrapper around a :class:`uuid.UUID`. Two identifiers are
    equal when their underlying UUIDs are equal. The nil UUID is never a
    valid identifier.

    """

    model_config = ConfigDict(frozen=True)

    value: UUID
    """Underlying 128-bit UUID."""

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: UUID) -> UUID:
        """Reject the nil UUID."""
        if v == NIL_UUID:
            msg = "Entity id cannot be the nil UUID"
            raise ValueError(msg)
        return v

    @classmethod
    def new(cls) -> EntityId:
        """Create an identifier backed by a random (version 4) UUID."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, s: str) -> EntityId:
        """Parse an identifier from its textual UUID form.

        Raises:
            ValidationError: If ``s`` is empty or names the nil UUID.
            ParseError: If ``s`` is not a well-formed UUID.

        """
        if not s:
            msg = "Entity id string cannot be empty"
            raise ValidationError(msg)
        try:
            value = UUID(s)
        except ValueError as e:
            msg = f"Invalid entity id {s!r}: {e!s}"
            raise ParseError(msg) from e
        if value == NIL_UUID:
            msg = "Entity id string cannot be the nil UUID"
            raise ValidationError(msg)
        return cls(value=value)

    def to_string(self) -> str:
        """Return the canonical 8-4-4-4-12 lowercase hex form."""
        return str(self.value)

    def to_uuid(self) -> UUID:
        """Return the underlying UUID."""
        return self.value

    def __str__(self) -> str:
        return self.to_string()

"""Shared test fixtures and configuration."""

from __future__ import annotations

from uuid import UUID

import pytest

from application.errors import AppError, ErrorCategory
from domain.value_objects.entity_id import EntityId

SAMPLE_UUID_TEXT = "3f2b8c1e-9d4a-4e7b-a1c2-5d6e7f8a9b0c"


@pytest.fixture
def sample_cause() -> ValueError:
    """Return a plain exception used as the wrapped cause."""
    return ValueError("quantity must be positive")


@pytest.fixture
def sample_app_error(sample_cause: ValueError) -> AppError:
    """Create a validation AppError without status or message."""
    return AppError(sample_cause, ErrorCategory.VALIDATION)


@pytest.fixture
def sample_uuid() -> UUID:
    """Return a consistent sample UUID."""
    return UUID(SAMPLE_UUID_TEXT)


@pytest.fixture
def sample_entity_id(sample_uuid: UUID) -> EntityId:
    """Create an EntityId from the sample UUID."""
    return EntityId(value=sample_uuid)

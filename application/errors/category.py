"""Error categories used to classify application errors for downstream routing."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType

UNKNOWN_CATEGORY_NAME = "UnknownCategoryError"


class ErrorCategory(IntEnum):
    """Enumerate the categories an application error can belong to."""

    VALIDATION = 0
    INTERNAL = 1
    NOT_FOUND = 2
    METHOD_NOT_ALLOWED = 3
    SECURITY = 4
    FORBIDDEN = 5
    UNAUTHORIZED = 6

    def __str__(self) -> str:
        return category_name(self)


_CATEGORY_NAMES = MappingProxyType(
    {
        ErrorCategory.VALIDATION: "ValidationError",
        ErrorCategory.INTERNAL: "InternalError",
        ErrorCategory.NOT_FOUND: "NotFoundError",
        ErrorCategory.METHOD_NOT_ALLOWED: "MethodNotAllowedError",
        ErrorCategory.SECURITY: "SecurityError",
        ErrorCategory.FORBIDDEN: "ForbiddenError",
        ErrorCategory.UNAUTHORIZED: "UnauthorizedError",
    },
)


def category_name(category: object) -> str:
    """Return the human-readable name of ``category``.

    Accepts enum members as well as raw integers. Anything outside the
    defined set yields ``UNKNOWN_CATEGORY_NAME``.
    """
    if isinstance(category, bool) or not isinstance(category, int):
        return UNKNOWN_CATEGORY_NAME
    return _CATEGORY_NAMES.get(category, UNKNOWN_CATEGORY_NAME)

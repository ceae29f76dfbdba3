"""Application error model exports."""

from application.errors.app_error import (
    AppError,
    ErrorCode,
    as_app_error,
    bad_request,
    forbidden,
    internal_server_error,
    is_category,
    not_found,
    unauthorized,
)
from application.errors.category import UNKNOWN_CATEGORY_NAME, ErrorCategory, category_name

__all__ = [
    "UNKNOWN_CATEGORY_NAME",
    "AppError",
    "ErrorCategory",
    "ErrorCode",
    "as_app_error",
    "bad_request",
    "category_name",
    "forbidden",
    "internal_server_error",
    "is_category",
    "not_found",
    "unauthorized",
]

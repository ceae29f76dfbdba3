"""Mapping of domain exceptions onto categorized application errors."""

from typing import Any

import structlog

from application.errors import (
    AppError,
    bad_request,
    internal_server_error,
    not_found,
)
from domain.exceptions import AggregateNotFoundError, DomainError, ValidationError

logger = structlog.get_logger()


class AppErrorMapper:
    """Translate domain exceptions into AppErrors and AppErrors into log fields."""

    @staticmethod
    def from_domain_error(exc: DomainError) -> AppError:
        """Map a domain exception to a categorized AppError.

        Args:
            exc: The domain exception raised by the domain layer

        Returns:
            AppError: Validation failures map to 400, missing aggregates to 404
            and any other domain error to 500.

        """
        if isinstance(exc, ValidationError):
            app_error = bad_request(exc)
        elif isinstance(exc, AggregateNotFoundError):
            app_error = not_found(exc)
        else:
            app_error = internal_server_error(exc)

        logger.debug(
            "domain_error_mapped",
            error_type=type(exc).__name__,
            category=str(app_error.category),
            status=app_error.status,
        )
        return app_error

    @staticmethod
    def to_log_context(app_error: AppError) -> dict[str, Any]:
        """Flatten an AppError into structured logging fields.

        Args:
            app_error: The error to describe

        Returns:
            dict: ``error_*`` fields plus one ``meta_<key>`` entry per metadata key

        """
        context: dict[str, Any] = {
            "error_category": str(app_error.category),
            "error_status": app_error.status,
            "error_internal_code": app_error.code.internal,
            "error_message": app_error.message if app_error.message is not None else str(app_error),
        }
        for key, value in app_error.metadata.items():
            context[f"meta_{key}"] = value
        return context

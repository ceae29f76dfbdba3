"""Structured application error wrapping a lower-level cause.

An ``AppError`` is created once, at the boundary where a meaningful category
is known, and then propagated like any other exception (or returned inside a
``returns`` ``Failure``). The HTTP/response layer reads ``status``,
``message`` and ``metadata``; classification goes through :func:`is_category`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from http import HTTPStatus
from typing import Any

from pydantic import BaseModel, ConfigDict

from application.errors.category import ErrorCategory


class ErrorCode(BaseModel):
    """Category plus an optional implementation-defined internal code."""

    model_config = ConfigDict(frozen=True)

    category: ErrorCategory
    internal: int | None = None


class AppError(Exception):
    """Application error carrying status, category and free-form metadata.

    ``str(error)`` renders the wrapped cause only; ``message`` is kept for the
    response layer and does not change the rendered text.
    """

    def __init__(
        self,
        err: BaseException,
        category: ErrorCategory,
        internal_code: int | None = None,
        *,
        status: int | None = None,
        message: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(err)
        self.err = err
        self.status = status
        self.code = ErrorCode(category=category, internal=internal_code)
        self.message = message
        self.metadata: dict[str, str] = dict(metadata) if metadata else {}
        self.__cause__ = err

    @property
    def category(self) -> ErrorCategory:
        """Shortcut to ``code.category``."""
        return self.code.category

    def __str__(self) -> str:
        return str(self.err)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(err={self.err!r}, code={self.code!r}, "
            f"status={self.status!r}, metadata={self.metadata!r})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # BaseException rebuilds from self.args, which lacks the category.
        return (
            type(self),
            (self.err, self.code.category, self.code.internal),
            {**self.__dict__, "metadata": dict(self.metadata)},
        )

    def unwrap(self) -> BaseException:
        """Return the wrapped cause."""
        return self.err

    # ========================================================================
    # METADATA BUILDERS
    # ========================================================================

    def with_field(self, value: str) -> AppError:
        """Return a copy with ``metadata["field"]`` set to ``value``."""
        return self._with_metadata("field", value)

    def with_row(self, row: int) -> AppError:
        """Return a copy with ``metadata["row"]`` set to the decimal form of ``row``."""
        return self._with_metadata("row", str(row))

    def with_info(self, info: str) -> AppError:
        """Return a copy with ``metadata["info"]`` set to ``info``."""
        return self._with_metadata("info", info)

    def _with_metadata(self, key: str, value: str) -> AppError:
        # Metadata is copied so the receiver and sibling copies never alias.
        clone = AppError(
            self.err,
            self.code.category,
            self.code.internal,
            status=self.status,
            message=self.message,
            metadata={**self.metadata, key: value},
        ).with_traceback(self.__traceback__)
        if hasattr(self, "__notes__"):
            clone.__notes__ = list(self.__notes__)
        return clone


# ============================================================================
# STATUS CONSTRUCTORS
# ============================================================================


def _with_status(status: HTTPStatus, category: ErrorCategory, err: BaseException) -> AppError:
    return AppError(err, category, status=int(status), message=str(err))


def bad_request(err: BaseException) -> AppError:
    """Create a 400 Bad Request error in the validation category."""
    return _with_status(HTTPStatus.BAD_REQUEST, ErrorCategory.VALIDATION, err)


def not_found(err: BaseException) -> AppError:
    """Create a 404 Not Found error in the not-found category."""
    return _with_status(HTTPStatus.NOT_FOUND, ErrorCategory.NOT_FOUND, err)


def unauthorized(err: BaseException) -> AppError:
    """Create a 401 Unauthorized error in the unauthorized category."""
    return _with_status(HTTPStatus.UNAUTHORIZED, ErrorCategory.UNAUTHORIZED, err)


def forbidden(err: BaseException) -> AppError:
    """Create a 403 Forbidden error in the forbidden category."""
    return _with_status(HTTPStatus.FORBIDDEN, ErrorCategory.FORBIDDEN, err)


def internal_server_error(err: BaseException) -> AppError:
    """Create a 500 Internal Server Error in the internal category."""
    return _with_status(HTTPStatus.INTERNAL_SERVER_ERROR, ErrorCategory.INTERNAL, err)


# ============================================================================
# CLASSIFICATION
# ============================================================================


def _walk_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield ``err`` and every exception it wraps, depth first.

    Follows ``AppError.err``, explicit ``__cause__`` links and the members of
    exception groups. Implicit ``__context__`` links are not followed.
    """
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        if isinstance(current, AppError):
            stack.append(current.err)
            continue
        if current.__cause__ is not None:
            stack.append(current.__cause__)
        if isinstance(current, BaseExceptionGroup):
            stack.extend(reversed(current.exceptions))


def as_app_error(err: BaseException | None) -> AppError | None:
    """Return the first ``AppError`` in the wrapping chain of ``err``, if any."""
    if err is None:
        return None
    for current in _walk_chain(err):
        if isinstance(current, AppError):
            return current
    return None


def is_category(err: BaseException | None, category: ErrorCategory) -> bool:
    """Check whether ``err`` wraps an ``AppError`` of the given category."""
    app_error = as_app_error(err)
    if app_error is None:
        return False
    return app_error.code.category == category

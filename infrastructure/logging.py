"""structlog configuration and AppError log enrichment."""

import logging
import logging.handlers
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from application.errors import as_app_error
from application.mappers.error_mappers import AppErrorMapper
from infrastructure.config import Settings
from infrastructure.config import settings as default_settings


def add_app_error_context(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Expand an AppError passed as ``error`` or ``exc_info`` into flat log fields."""
    candidate: Any = event_dict.get("error")
    if not isinstance(candidate, BaseException):
        exc_info = event_dict.get("exc_info")
        if isinstance(exc_info, BaseException):
            candidate = exc_info
        elif isinstance(exc_info, tuple) and len(exc_info) == 3:
            candidate = exc_info[1]
        elif exc_info is True:
            candidate = sys.exc_info()[1]
        else:
            return event_dict

    app_error = as_app_error(candidate)
    if app_error is None:
        return event_dict

    for key, value in AppErrorMapper.to_log_context(app_error).items():
        event_dict.setdefault(key, value)
    return event_dict


def setup_logging(settings: Settings | None = None) -> None:
    """Configure unified logging for structlog and the standard library."""
    settings = settings or default_settings

    common_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_error_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.app_env == "development":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *common_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=common_processors,
        processor=renderer,
    )

    # Handlers
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            settings.log_dir / f"{settings.app_env}.log",
            when="midnight",
            interval=1,
            backupCount=7,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Root Logger: replace handlers from an earlier setup, keep foreign ones
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

"""Structured logging for Friday's Lies.

The simulation core only ever logs; log calls never influence state. Output
is shaped by :class:`~fridays_lies.core.config.Settings`:

- ``log_level`` sets the threshold, and ``debug`` forces it down to DEBUG.
- ``json_logs`` switches from the console renderer to one JSON object per line.
- ``app_name`` is stamped on every entry.

Example:
    >>> from fridays_lies.core.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> logger = get_logger(__name__)
    >>> logger.info("World created", pill="BLUE", entities=8)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from fridays_lies.core.config import Settings


class AppContext:
    """Processor stamping the application name on every log entry."""

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("app", self.app_name)
        return event_dict


def resolve_level(settings: Settings) -> int:
    """Numeric threshold for ``settings``; debug mode always logs everything."""
    if settings.debug:
        return logging.DEBUG
    return logging.getLevelName(settings.log_level)


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain ending in the renderer ``settings`` asks for."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        AppContext(settings.app_name),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from application settings.

    Args:
        settings: Application settings; the cached settings when omitted.

    Example:
        >>> from fridays_lies.core.config import Settings
        >>> configure_logging(Settings(log_level="DEBUG", json_logs=True))
    """
    if settings is None:
        from fridays_lies.core.config import get_settings

        settings = get_settings()

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(settings)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values included in every later log entry, such as the session's pill.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "AppContext",
    "resolve_level",
    "build_processors",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]

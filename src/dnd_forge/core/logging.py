"""Structured logging configuration for the D&D 5E character forge.

Logging uses structlog for context-rich entries, rendered either as
colorful console output during development or JSON in production. The
defaults come from Settings (``DND_FORGE_LOG_LEVEL``, ``DND_FORGE_JSON_LOGS``,
``DND_FORGE_LOG_FILE``, ``DND_FORGE_DEBUG``); explicit arguments win.

Engines log routine computation at debug, dice rolls at info and missing
reference data (``reference_data_missing``) at warning.

Example:
    >>> from dnd_forge.core.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> logger = get_logger(__name__)
    >>> logger.info("Dice rolled", expression="1d20", total=17)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from dnd_forge.core.config import Settings, get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


_STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every entry with the package name."""
    event_dict["app"] = "dnd_forge"
    return event_dict


def _add_version(version: str) -> Processor:
    def processor(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("app_version", version)
        return event_dict

    return processor


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | Path | None = None,
    settings: Settings | None = None,
) -> None:
    """Configure application-wide logging.

    Args:
        level: Logging level; defaults to ``settings.log_level``.
        json_format: Render JSON lines; defaults to ``settings.json_logs``.
        log_file: Extra file for stdlib log records; defaults to
            ``settings.log_file``.
        settings: Settings to read defaults from; defaults to get_settings().

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    if settings is None:
        settings = get_settings()
    level = level or settings.log_level
    if json_format is None:
        json_format = settings.json_logs
    if log_file is None:
        log_file = settings.log_file

    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        _add_version(settings.app_version),
    ]
    if settings.debug:
        shared_processors.append(
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )
    shared_processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Standard library logging for anything that does not go through structlog
    logging.basicConfig(
        format=_STDLIB_FORMAT,
        level=log_level,
        stream=sys.stdout,
        force=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(_STDLIB_FORMAT))
        logging.getLogger().addHandler(file_handler)

    get_logger(__name__).debug(
        "Logging configured",
        app_name=settings.app_name,
        level=level,
        json_format=json_format,
        full_point_spend=settings.rules.require_full_point_spend,
        dice_seeded=settings.dice.seed is not None,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A configured structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log entries.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        >>> bind_context(character_id="abc123", campaign_id="c42")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "add_app_context",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]

"""Structured Logging for fieldrules

fieldrules is an embedded library: it never configures logging on import.
Modules log through structlog loggers from the registry below; the host
application either calls ``configure_logging`` or wires structlog itself.

- Colored, human-readable dev output
- JSON structured production output
- Context propagation through structlog contextvars
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

from fieldrules.core.config import get_settings


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that tags events with the emitting library."""
    event_dict.setdefault("library", "fieldrules")
    return event_dict


def _truncate_values(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that shortens oversized field values (validated payloads can be large)."""
    limit = 200
    for key, value in event_dict.items():
        if isinstance(value, str) and len(value) > limit:
            event_dict[key] = value[:limit] + "..."
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both dev and prod configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
        _truncate_values,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to FIELDRULES_LOG_LEVEL.
        json_logs: If True, output JSON format. If False, colored console output.
            Defaults to FIELDRULES_LOG_JSON.
    """
    settings = get_settings()
    if level is None:
        level = settings.LOG_LEVEL
    if json_logs is None:
        json_logs = settings.LOG_JSON

    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class LoggerRegistry:
    """Registry of loggers for the engine's components."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given component."""
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"fieldrules.{name}")
        return cls._loggers[name]


def pool_logger() -> structlog.stdlib.BoundLogger:
    """Logger for worker pool events."""
    return LoggerRegistry.get("pool")


def rule_logger() -> structlog.stdlib.BoundLogger:
    """Logger for rule execution events."""
    return LoggerRegistry.get("rule")


def validator_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validator events."""
    return LoggerRegistry.get("validator")

"""Logging configuration for calday.

calday emits structlog events (month rollover clamping, skipped
descriptors) through stdlib loggers under the ``calday`` name. The
``calday`` logger carries a NullHandler and stdlib's default WARNING level
applies, so the library stays quiet until the host application configures
logging, either directly or through ``configure_logging``.
"""

import logging

import structlog
from structlog.types import Processor

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_ROOT = "calday"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger writing to the stdlib logger of the emitting module."""
    name = name or _ROOT
    return structlog.wrap_logger(logging.getLogger(name), logger_name=name)


def _resolve_level(level: str) -> int:
    name = level.upper()
    if name not in _LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {_LEVELS}")
    return getattr(logging, name)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure calday logging.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        json_output: True for JSON output (production), False for console

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    numeric_level = _resolve_level(level)
    logging.basicConfig(format="%(message)s", level=numeric_level)
    logging.getLogger(_ROOT).setLevel(numeric_level)

    processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

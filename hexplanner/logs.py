"""Structured logging setup.

Library modules only call ``structlog.get_logger(__name__)``.  Entry points
call :func:`configure_logging` once, which sends every event through the
standard library root logger on stderr so command output on stdout stays
clean.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOG_FORMATS = ("console", "json")


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Route structlog through the standard library logger.

    Args:
        level: Standard logging level name, e.g. ``"DEBUG"``.
        fmt: ``"console"`` for human-readable lines, ``"json"`` for one
            JSON object per event.

    Raises:
        ValueError: If ``level`` or ``fmt`` is not recognised.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        msg = f"Unknown log level: {level}"
        raise ValueError(msg)
    if fmt not in LOG_FORMATS:
        msg = f"Unknown log format: {fmt} (expected one of {', '.join(LOG_FORMATS)})"
        raise ValueError(msg)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level, force=True)

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

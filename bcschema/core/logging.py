"""structlog setup shared by the library and the scripts.

Usage:
    from bcschema.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Schemas built", count=12)
"""

from __future__ import annotations

import logging
import sys

import structlog

from bcschema.core.config import get_settings

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Configure structlog once. Later calls only change the level when given."""
    global _configured

    if _configured and level is None:
        return

    name = (level or get_settings().LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> structlog.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)

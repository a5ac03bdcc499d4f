"""Logging setup for the tool layer.

Tool servers talk over stdio, so logs go to stderr as JSON lines.
"""

import logging
import sys

import structlog

from tool_output.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Logging level name. Defaults to ``settings.log_level``.
    """
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

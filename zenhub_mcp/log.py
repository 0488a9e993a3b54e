"""
Structured logging for ZenHub MCP

JSON lines on stderr. stdout is the MCP stdio channel, so nothing may be
written there.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog


_configured = False


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None, force: bool = False) -> None:
    """
    Configure structlog once at startup.

    Later calls are no-ops unless force=True (tests use that).
    """
    global _configured

    if _configured and not force:
        return

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )

    _configured = True


def reset_logging() -> None:
    """Forget the configuration (tests only)."""
    global _configured
    _configured = False


class _ModuleLogger:
    """
    Module-level logger handle.

    Binding a structlog proxy freezes the configuration current at that
    moment, so the bind happens per call instead. Module loggers created
    at import then follow a configure_logging() made later in main().
    """

    def __init__(self, name: str):
        self.name = name

    def __getattr__(self, method: str):
        return getattr(structlog.get_logger().bind(logger=self.name), method)


def get_logger(name: str):
    """Get a logger tagged with the module name."""
    if not _configured:
        configure_logging()
    return _ModuleLogger(name)

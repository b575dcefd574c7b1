"""Logging configuration and the entry/exit operation log.

Every record carries the current request id (or "-" outside a request),
set by RequestIDMiddleware through request_id_var.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from maintainer.core.config import get_settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Attach request_id from the current context to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


@contextmanager
def log_operation(
    logger: logging.Logger, component: str, operation: str
) -> Iterator[str]:
    """Log "Executing ..." on entry and "Leaving ..." on exit (also on error).

    Yields the "<component> - <operation> method" label so callers can
    prefix their own messages with it.

    Example:
        with log_operation(logger, "Role service", "Create") as log_info:
            logger.info("%s - Data created.", log_info)
    """
    log_info = f"{component} - {operation} method"
    logger.info("Executing %s.", log_info)
    try:
        yield log_info
    finally:
        logger.info("Leaving %s.", log_info)

"""Logging for the codelists service.

Every record carries the id of the HTTP request it was emitted under
(``-`` outside a request), so audit writes, hierarchy warnings and
storage errors of one call can be correlated in the output.

Usage:
    setup_logging()                      # once, from the lifespan
    logger = get_logger(__name__)
    token = bind_request_id("abc-123")   # RequestIDMiddleware does this
    ...
    reset_request_id(token)
"""

import logging
import sys
from contextvars import ContextVar, Token

from codelists.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"
NO_REQUEST_ID = "-"

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def bind_request_id(request_id: str) -> Token[str | None]:
    """Make request_id the id attached to records logged in this context."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    return _current_request_id.get()


class RequestIdFilter(logging.Filter):
    """Set record.request_id from the current context (never drops records)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _current_request_id.get() or NO_REQUEST_ID
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. SQL statement logging stays at WARNING unless
    DATABASE_ECHO is set.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=[handler])
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.
    """
    return logging.getLogger(name)

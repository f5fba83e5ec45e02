from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional, Union


# Correlation id of the request being served, "-" outside requests
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | cid=%(correlation_id)s | %(message)s"

# Libraries that log every request or statement at INFO
_CHATTY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "alembic.runtime.migration")


class LoggingContextFilter(logging.Filter):
    """Copies the current correlation id onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.correlation_id = correlation_id_var.get() or "-"
        return True


# PUBLIC_INTERFACE
def configure_logging(level: Union[int, str] = logging.INFO, quiet_libraries: bool = True) -> None:
    """
    Send all logging to stdout with the correlation id in every line.

    Args:
        level: root level, either a logging constant or a name such as "DEBUG".
        quiet_libraries: raise chatty third-party loggers to WARNING.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    # replace handlers installed by basicConfig or a previous call
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)

    if quiet_libraries and level > logging.DEBUG:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

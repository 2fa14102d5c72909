"""Logging configuration shared by the store backends and bootstrap."""

import logging
import sys

LOG_FORMAT = "%(levelname)s:     %(name)s - %(message)s"

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.dialects")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging to write application logs to stdout."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)

    logging.getLogger("gtd").setLevel(level)

"""Logging setup for the tracker service.

One stdout handler on the root logger, level from ``settings.LOG_LEVEL``
unless the caller passes one.  Access decisions, role changes and candidate
mutations are logged by their services as event names with ``extra=``
context; this module only decides where those records go.
"""

import logging
import logging.config

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def setup_logging(level: str | None = None) -> None:
    """Install the stdout handler; safe to call more than once.

    Unknown level names fall back to INFO.
    """
    name = (level or settings.LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(name), int):
        name = "INFO"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "tracker": {"format": LOG_FORMAT, "datefmt": LOG_DATEFMT},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "tracker",
                },
            },
            "root": {"level": name, "handlers": ["stdout"]},
            "loggers": {
                "uvicorn.access": {"level": "WARNING"},
            },
        }
    )

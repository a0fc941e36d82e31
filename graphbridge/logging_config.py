"""
Logging configuration for the bridge process.

The same dictConfig is used by the console commands and handed to uvicorn by
`serve`. Uvicorn's own loggers fall through to the root handler; only the
access log is routed separately so health probes can be dropped.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional


class HealthCheckFilter(logging.Filter):
    """Drops uvicorn access lines for GET /health."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "uvicorn.access":
            message = record.getMessage()
            if "/health" in message and "GET" in message:
                return False
        return True


def get_logging_config(level: Optional[str] = None) -> Dict[str, Any]:
    """Build the dictConfig mapping, defaulting the level to LOG_LEVEL."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "skip_health": {"()": HealthCheckFilter},
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["skip_health"],
            },
        },
        "loggers": {
            "graphbridge": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["access"],
                "level": "INFO",
                "propagate": False,
            },
        },
        "root": {"level": level, "handlers": ["console"]},
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the logging configuration to the running process."""
    logging.config.dictConfig(get_logging_config(level))

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """
    dictConfig payload shared by the app loggers and Uvicorn's own loggers,
    so everything ends up on stdout with one format.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "flight_data": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def configure_logging(level: Optional[str] = None) -> None:
    """
    Apply the logging config. Call before uvicorn.run() so workers inherit it.
    Falls back to LOG_LEVEL from settings when no level is passed.
    """
    if level is None:
        from flight_data.config import settings

        level = settings.log_level

    logging.config.dictConfig(build_logging_config(level))
    logging.getLogger("flight_data.logging").debug("Logging configured (level=%s)", level)

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import uvicorn

from flight_data.config import Settings, get_settings
from flight_data.logging_config import configure_logging

logger = logging.getLogger("flight_data.run_uvicorn")


def uvicorn_options(settings: Settings) -> Dict[str, Any]:
    """Keyword arguments for uvicorn.run(), taken from Settings (HOST, PORT, LOG_LEVEL)."""
    return {
        "host": settings.host,
        "port": settings.port,
        "log_level": settings.log_level.lower(),
        "reload": settings.debug,
        "log_config": None,
        "use_colors": False,
    }


def main(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    options = uvicorn_options(settings)
    logger.info(
        "Serving %s on %s:%s (env=%s)",
        settings.app_name,
        options["host"],
        options["port"],
        settings.environment,
    )
    uvicorn.run("flight_data.main:app", **options)


if __name__ == "__main__":
    main()

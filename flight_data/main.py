from __future__ import annotations

import logging
from typing import Dict, Optional

from dotenv import load_dotenv

# Load environment variables from .env before settings are read,
# so all downstream modules see the env.
load_dotenv()

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from flight_data.config import Settings, get_settings
from flight_data.routers import auth as auth_router
from flight_data.routers import public as public_router
from flight_data.services.render import STATIC_DIR

logger = logging.getLogger("flight_data.main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.state.settings = settings

    # Public pages (welcome, logo)
    app.include_router(public_router.router)

    # Login / register hand-off to the identity service (config dependent)
    app.include_router(auth_router.build_auth_router(settings))

    # Static files
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/healthz")
    async def healthcheck() -> Dict[str, str]:
        return {"status": "ok", "app": settings.app_name}

    logger.info(
        "%s app created (env=%s, login=%s, register=%s)",
        settings.app_name,
        settings.environment,
        settings.login_enabled,
        settings.registration_enabled,
    )
    return app


app = create_app()

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from flight_data.config import Settings

logger = logging.getLogger("flight_data.routers.auth")


def _redirect_to(target: str):
    def endpoint() -> RedirectResponse:
        return RedirectResponse(url=target, status_code=status.HTTP_303_SEE_OTHER)

    return endpoint


def build_auth_router(settings: Settings) -> APIRouter:
    """
    Entry points into the external identity service.

    - /login  (name "login")    exists only when LOGIN_URL is set
    - /register (name "register") exists only when REGISTER_URL is set

    The welcome page decides which links to show from whether these routes
    are registered, so leaving a URL unset hides the matching links.
    """
    router = APIRouter(tags=["auth"], include_in_schema=False)

    if settings.login_enabled:
        router.add_api_route(
            "/login",
            _redirect_to(settings.login_url.strip()),
            methods=["GET"],
            name="login",
        )
        logger.info("Login route enabled -> %s", settings.login_url)
    else:
        logger.info("LOGIN_URL not set; login route disabled.")

    if settings.registration_enabled:
        router.add_api_route(
            "/register",
            _redirect_to(settings.register_url.strip()),
            methods=["GET"],
            name="register",
        )
        logger.info("Register route enabled -> %s", settings.register_url)
    else:
        logger.info("REGISTER_URL not set; register route disabled.")

    return router

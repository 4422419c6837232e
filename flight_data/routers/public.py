from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response

from flight_data.services.auth_service import visitor_is_authenticated
from flight_data.services.i18n import (
    Translator,
    available_locales,
    get_translator,
    negotiate_locale,
)
from flight_data.services.render import absolute_url, has_route, render_logo, render_template
from flight_data.services.welcome import build_welcome_page

logger = logging.getLogger("flight_data.routers.public")

router = APIRouter(tags=["Public"])


def get_today() -> date:
    """Render-time clock; overridden in tests."""
    return datetime.now().date()


def request_translator(
    request: Request,
    lang: Optional[str] = Query(default=None),
) -> Translator:
    settings = request.app.state.settings
    locale = negotiate_locale(
        query_lang=lang,
        accept_language=request.headers.get("accept-language"),
        default=settings.default_locale,
        supported=available_locales(),
    )
    return get_translator(locale)


@router.get("/", response_class=HTMLResponse, name="welcome")
def welcome_page(
    request: Request,
    authenticated: bool = Depends(visitor_is_authenticated),
    today: date = Depends(get_today),
    translator: Translator = Depends(request_translator),
) -> HTMLResponse:
    """
    Public landing page. Which auth links show up depends on whether the
    login/register routes are registered and whether the visitor is
    signed in.
    """
    settings = request.app.state.settings

    page = build_welcome_page(
        has_login_route=has_route(request.app, "login"),
        has_register_route=has_route(request.app, "register"),
        authenticated=authenticated,
        route_url=lambda name: str(request.url_for(name)),
        dashboard_url=absolute_url(request, settings.dashboard_path),
        today=today,
    )

    logger.info(
        "Rendering welcome page (locale=%s, authenticated=%s, nav=%s)",
        translator.locale,
        authenticated,
        [link.label for link in page.nav_links],
    )

    context = {
        "request": request,
        "translator": translator,
        "page": page,
        "app_name": settings.app_name,
        "tailwind_cdn_url": settings.tailwind_cdn_url,
    }
    return render_template("welcome.html", context)


@router.get("/logo.svg", name="logo", include_in_schema=False)
def logo_svg() -> Response:
    """The aircraft logo as a standalone image (favicon)."""
    return Response(content=str(render_logo()), media_type="image/svg+xml")

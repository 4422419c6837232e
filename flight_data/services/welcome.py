from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional

from pydantic import BaseModel

logger = logging.getLogger("flight_data.services.welcome")


# ---------------------------------------------------------------------------
# View models
# ---------------------------------------------------------------------------

class NavLink(BaseModel):
    """
    One link in the navigation auth block.

    `label` is the untranslated source string; the template runs it
    through _() so the catalogue stays keyed by English text.
    """
    label: str
    href: str
    primary: bool = False


class WelcomePage(BaseModel):
    """
    Everything welcome.html needs beyond the request and translator:
    - show_auth_nav: whether the auth block is rendered at all
    - nav_links: the links inside that block
    - register_href: target of the hero + CTA band trial links, or None
    - year: footer copyright year
    """
    show_auth_nav: bool
    nav_links: List[NavLink]
    register_href: Optional[str] = None
    year: int


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

def resolve_nav_links(
    *,
    has_login_route: bool,
    has_register_route: bool,
    authenticated: bool,
    route_url: Callable[[str], str],
    dashboard_url: str,
) -> List[NavLink]:
    """
    Links for the navigation auth block.

    Authenticated visitors get Dashboard only. Guests get Sign In, plus
    Get Started when registration exists. Nothing at all without a login
    route.
    """
    if not has_login_route:
        return []

    if authenticated:
        return [NavLink(label="Dashboard", href=dashboard_url)]

    links = [NavLink(label="Sign In", href=route_url("login"))]
    if has_register_route:
        links.append(NavLink(label="Get Started", href=route_url("register"), primary=True))
    return links


def build_welcome_page(
    *,
    has_login_route: bool,
    has_register_route: bool,
    authenticated: bool,
    route_url: Callable[[str], str],
    dashboard_url: str,
    today: date,
) -> WelcomePage:
    nav_links = resolve_nav_links(
        has_login_route=has_login_route,
        has_register_route=has_register_route,
        authenticated=authenticated,
        route_url=route_url,
        dashboard_url=dashboard_url,
    )
    register_href = route_url("register") if has_register_route else None

    logger.debug(
        "Welcome page (login=%s, register=%s, authenticated=%s, links=%s)",
        has_login_route,
        has_register_route,
        authenticated,
        [link.label for link in nav_links],
    )

    return WelcomePage(
        show_auth_nav=has_login_route,
        nav_links=nav_links,
        register_href=register_href,
        year=today.year,
    )

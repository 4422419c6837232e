from __future__ import annotations

import logging

from fastapi import Request

logger = logging.getLogger("flight_data.services.auth")


def visitor_is_authenticated(request: Request) -> bool:
    """
    True when the visitor carries the session cookie issued by the identity
    service. Issuing and validating that session happens over there; the
    public site only needs to know whether one is present.
    """
    cookie_name = request.app.state.settings.session_cookie_name
    cookie_val = request.cookies.get(cookie_name)
    authenticated = bool(cookie_val and cookie_val.strip())
    logger.debug("Visitor authenticated=%s (cookie=%s)", authenticated, cookie_name)
    return authenticated

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Final

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, pass_context, select_autoescape
from jinja2.runtime import Context
from markupsafe import Markup
from starlette.routing import NoMatchFound

from flight_data.services.i18n import Translator

logger = logging.getLogger("flight_data.services.render")

PACKAGE_DIR: Final[Path] = Path(__file__).resolve().parent.parent
TEMPLATE_DIR: Final[Path] = PACKAGE_DIR / "templates"
STATIC_DIR: Final[Path] = PACKAGE_DIR / "static"

logger.debug("Template dir: %s", TEMPLATE_DIR)
logger.debug("Static dir: %s", STATIC_DIR)


@pass_context
def _gettext(context: Context, message: str) -> str:
    translator = context.get("translator")
    if isinstance(translator, Translator):
        return translator.resolve(message)
    return message


@pass_context
def _ngettext(context: Context, singular: str, plural: str, n: int) -> str:
    return _gettext(context, singular if n == 1 else plural)


def build_environment() -> Environment:
    """
    Jinja environment for all pages. The i18n extension gives templates
    _()/gettext(); translations are looked up on the `translator` that
    render_template puts in the context.
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "svg"]),
        extensions=["jinja2.ext.i18n"],
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.install_gettext_callables(_gettext, _ngettext, newstyle=False)
    return env


templates = Jinja2Templates(env=build_environment())


def get_template_dir() -> Path:
    return TEMPLATE_DIR


def get_static_dir() -> Path:
    return STATIC_DIR


def has_route(app: FastAPI, name: str) -> bool:
    """
    Whether a route called `name` is registered on the app, including
    routes that came in through include_router.
    """
    try:
        app.url_path_for(name)
    except NoMatchFound:
        return False
    return True


def absolute_url(request: Request, path: str) -> str:
    """Absolute URL for a plain path on this site (mount prefix included)."""
    return str(request.base_url).rstrip("/") + "/" + path.lstrip("/")


def render_logo(**attributes: Any) -> Markup:
    """
    Render the logo component outside of a page, e.g. for /logo.svg.
    Keyword arguments are passed straight to the `logo` macro.
    """
    module = templates.env.get_template("components/logo.html").module
    return module.logo(**attributes)  # type: ignore[attr-defined]


def render_template(name: str, context: Dict[str, Any]) -> HTMLResponse:
    """
    Thin wrapper around Starlette's TemplateResponse so routers can
    render Jinja templates with a consistent API.

    Expects `context` to include a `request` key; a `translator` key is
    optional and defaults to pass-through English.
    """
    request = context.get("request")
    if not isinstance(request, Request):
        raise ValueError("Context passed to render_template must include a 'request' key with a FastAPI Request instance.")
    context.setdefault("translator", Translator(locale="en"))
    return templates.TemplateResponse(request, name, context)

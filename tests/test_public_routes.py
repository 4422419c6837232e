from datetime import date

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from flight_data.services.render import absolute_url, has_route, render_template


def test_healthz(make_client) -> None:
    resp = make_client().get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "Flight Data"}


def test_footer_uses_render_time_year(make_client) -> None:
    html = make_client(today=date(2031, 5, 17)).get("/").text
    assert "&copy; 2031 Flight Data. All rights reserved." in html

    html = make_client(today=date(1999, 1, 1)).get("/").text
    assert "&copy; 1999 Flight Data. All rights reserved." in html


def test_page_sections_render(make_client) -> None:
    html = make_client().get("/").text
    for text in (
        "Professional Flight Management",
        "Everything You Need",
        "Real-time Flight Tracking",
        "Crew Scheduling",
        "Aircraft Maintenance",
        "Route Planning",
        "Analytics &amp; Reporting",
        "Safety Management",
        "Ready to Streamline Your Flight Operations?",
    ):
        assert text in html
    assert html.count('class="bg-gray-50 rounded-xl p-8') == 6


def test_page_embeds_logo_twice_with_own_sizes(make_client) -> None:
    html = make_client().get("/").text
    assert '<svg class="w-6 h-6 text-white" viewBox="0 0 100 100"' in html
    assert '<svg class="w-5 h-5 text-white" viewBox="0 0 100 100"' in html


def test_guest_layout_shell(make_client) -> None:
    html = make_client().get("/").text
    assert html.lstrip().startswith("<!DOCTYPE html>")
    assert '<html lang="en">' in html
    assert "<title>Flight Data</title>" in html
    assert 'href="http://testserver/logo.svg"' in html
    assert 'href="http://testserver/static/css/app.css"' in html


def test_logo_svg_endpoint(make_client) -> None:
    resp = make_client().get("/logo.svg")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("image/svg+xml")
    assert resp.text.startswith('<svg class="h-8 w-8"')


def test_static_stylesheet_served(make_client) -> None:
    resp = make_client().get("/static/css/app.css")
    assert resp.status_code == 200
    assert "scroll-behavior" in resp.text


def test_login_and_register_redirect_to_identity_service(make_client) -> None:
    client = make_client(login=True, register=True)

    resp = client.get("/login", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "https://id.example.com/login"

    resp = client.get("/register", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "https://id.example.com/register"


def test_disabled_auth_routes_are_not_registered(make_client) -> None:
    client = make_client(login=False, register=False)
    assert client.get("/login", follow_redirects=False).status_code == 404
    assert client.get("/register", follow_redirects=False).status_code == 404
    assert not has_route(client.app, "login")
    assert not has_route(client.app, "register")
    assert has_route(client.app, "welcome")


def test_absolute_url_joins_base() -> None:
    app = FastAPI()

    @app.get("/where")
    def where(request: Request):
        return {"url": absolute_url(request, "/dashboard")}

    resp = TestClient(app).get("/where")
    assert resp.json() == {"url": "http://testserver/dashboard"}


def test_render_template_requires_request() -> None:
    with pytest.raises(ValueError):
        render_template("welcome.html", {"request": None})


def test_has_route_sees_included_router_routes() -> None:
    from flight_data.config import Settings
    from flight_data.main import create_app

    app = create_app(
        Settings(
            login_url="https://id.example.com/login",
            register_url="https://id.example.com/register",
        )
    )
    assert has_route(app, "login")
    assert has_route(app, "register")
    assert has_route(app, "welcome")
    assert has_route(app, "logo")
    assert not has_route(app, "dashboard")

    bare = create_app(Settings(login_url=None, register_url=None))
    assert has_route(bare, "welcome")
    assert not has_route(bare, "login")
    assert not has_route(bare, "register")

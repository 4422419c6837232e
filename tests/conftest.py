from __future__ import annotations

from datetime import date
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from flight_data.config import Settings
from flight_data.main import create_app
from flight_data.routers.public import get_today

FIXED_TODAY = date(2031, 5, 17)
LOGIN_URL = "https://id.example.com/login"
REGISTER_URL = "https://id.example.com/register"


def make_settings(*, login: bool = True, register: bool = True) -> Settings:
    return Settings(
        login_url=LOGIN_URL if login else None,
        register_url=REGISTER_URL if register else None,
        default_locale="en",
    )


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    def _make(
        *,
        login: bool = True,
        register: bool = True,
        authenticated: bool = False,
        today: date = FIXED_TODAY,
    ) -> TestClient:
        settings = make_settings(login=login, register=register)
        app = create_app(settings)
        app.dependency_overrides[get_today] = lambda: today

        cookies = {settings.session_cookie_name: "session-token"} if authenticated else None
        return TestClient(app, cookies=cookies)

    return _make

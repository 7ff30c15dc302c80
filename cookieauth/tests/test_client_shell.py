from __future__ import annotations

from datetime import UTC, datetime, timedelta
from urllib.parse import urlsplit

import pytest
import requests
from flask.testing import FlaskClient

from cookieauth.app import create_app
from cookieauth.application.use_cases.sessions.issue_session import IssueSessionUseCase
from cookieauth.client.api import ApiClient
from cookieauth.client.shell import GET_PROTECTED, LOGIN, LOGOUT, ClientShell
from cookieauth.domain.sessions.entities import Credential
from cookieauth.infrastructure.tokens.jwt_codec import PyJwtTokenCodec
from cookieauth.shared.config import AppConfig, TokenConfig

SECRET = "shell-secret-0123456789abcdefghijkl"


class _FlaskResponse:
    def __init__(self, response) -> None:
        self._response = response
        self.status_code = response.status_code
        self.ok = response.status_code < 400
        self.reason = response.status

    def json(self):
        payload = self._response.get_json(silent=True)
        if payload is None:
            raise ValueError("no JSON body")
        return payload


class FlaskSession:
    """Routes ``requests``-style calls into a Flask test client."""

    def __init__(self, client: FlaskClient) -> None:
        self._client = client

    def request(self, method, url, *, headers=None, timeout=None, params=None, json=None):
        response = self._client.open(
            urlsplit(url).path, method=method, query_string=params, json=json
        )
        return _FlaskResponse(response)


@pytest.fixture()
def flask_client() -> FlaskClient:
    app = create_app(AppConfig(token=TokenConfig(secret_key=SECRET)))
    with app.test_client() as client:
        yield client


@pytest.fixture()
def alerts() -> list[str]:
    return []


@pytest.fixture()
def shell(flask_client: FlaskClient, alerts: list[str]) -> ClientShell:
    api = ApiClient("http://localhost:3010", session=FlaskSession(flask_client))
    return ClientShell(api, alert=alerts.append)


def test_initial_view_offers_login(shell: ClientShell) -> None:
    assert shell.is_logged_in is False
    assert shell.data is None
    assert shell.actions() == [LOGIN, GET_PROTECTED]


def test_login_then_fetch_protected(shell: ClientShell, alerts: list[str]) -> None:
    shell.handle_login("admin", "password")

    assert shell.is_logged_in is True
    assert shell.actions() == [LOGOUT, GET_PROTECTED]

    shell.handle_protected()

    assert shell.data == {"message": "The secret data is: 42"}
    assert alerts == []


def test_failed_login_alerts_and_stays_logged_out(shell: ClientShell, alerts: list[str]) -> None:
    shell.handle_login("admin", "wrong")

    assert shell.is_logged_in is False
    assert alerts == ["Invalid credentials"]


def test_protected_without_login_alerts(shell: ClientShell, alerts: list[str]) -> None:
    shell.handle_protected()

    assert alerts == ["Unauthorized"]
    assert shell.data is None


def test_logout_returns_to_login_view(shell: ClientShell, alerts: list[str]) -> None:
    shell.handle_login("admin", "password")
    shell.handle_logout()

    assert shell.is_logged_in is False
    assert shell.actions() == [LOGIN, GET_PROTECTED]

    shell.handle_protected()
    assert alerts == ["Unauthorized"]


def test_expired_session_logs_view_out(
    shell: ClientShell, flask_client: FlaskClient, alerts: list[str]
) -> None:
    shell.handle_login("admin", "password")
    shell.handle_protected()
    assert shell.data == {"message": "The secret data is: 42"}

    two_hours_ago = datetime.now(UTC) - timedelta(hours=2)
    expired = IssueSessionUseCase(
        codec=PyJwtTokenCodec(secret=SECRET),
        admin=Credential(username="admin", password="password"),
        clock=lambda: two_hours_ago,
    ).execute("admin", "password")
    flask_client.set_cookie("token", expired.token)

    shell.handle_protected()

    assert shell.is_logged_in is False
    assert alerts == ["Invalid token"]
    assert shell.data == {"message": "The secret data is: 42"}


class _DownSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("backend unreachable")


def test_network_failure_alerts_without_state_change(alerts: list[str]) -> None:
    api = ApiClient("http://localhost:3010", session=_DownSession())
    shell = ClientShell(api, alert=alerts.append)

    shell.handle_login("admin", "password")
    shell.handle_protected()

    assert shell.is_logged_in is False
    assert shell.data is None
    assert alerts == ["backend unreachable", "backend unreachable"]

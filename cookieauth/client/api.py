# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

from cookieauth.shared.logging import logger

# Methods whose input travels as a JSON body rather than a query string.
_BODY_METHODS = ("post", "put", "patch")


@dataclass(slots=True, frozen=True)
class ApiResult:
    """Outcome of one backend call.

    ``status`` is ``None`` when the request never got a response.
    ``data`` is the decoded JSON payload, or ``{"error": message}`` when
    the call failed for any reason.
    """

    status: int | None
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def error(self) -> str | None:
        value = self.data.get("error")
        return str(value) if value else None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def unauthorized(self) -> bool:
        return self.status == 401


class ApiClient:
    """Talks to the backend over one cookie-keeping HTTP session."""

    def __init__(
        self,
        base_url: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def fetch_data(
        self, route: str, method: str, input_data: dict[str, Any] | None = None
    ) -> ApiResult:
        method = method.lower()
        kwargs: dict[str, Any] = {
            "headers": {"Content-Type": "application/json"},
            "timeout": self._timeout,
        }
        if input_data:
            if method == "get":
                kwargs["params"] = input_data
            elif method in _BODY_METHODS:
                kwargs["json"] = input_data

        url = f"{self._base_url}{route}"
        try:
            response = self._session.request(method.upper(), url, **kwargs)
        except requests.RequestException as exc:
            logger.error(f"client.fetch: {method.upper()} {route} failed: {exc}")
            return ApiResult(status=None, data={"error": str(exc)})

        try:
            payload = response.json()
        except ValueError:
            logger.error(
                f"client.fetch: {method.upper()} {route} returned non-JSON "
                f"status={response.status_code}"
            )
            return ApiResult(
                status=response.status_code,
                data={"error": f"Unexpected response (HTTP {response.status_code})"},
            )

        if not isinstance(payload, dict):
            payload = {"data": payload}

        if not response.ok:
            message = payload.get("message") or payload.get("error") or response.reason
            logger.warning(
                f"client.fetch: {method.upper()} {route} -> {response.status_code} {message}"
            )
            return ApiResult(status=response.status_code, data={"error": str(message)})

        return ApiResult(status=response.status_code, data=payload)

    def login(self, username: str, password: str) -> ApiResult:
        return self.fetch_data("/login", "post", {"username": username, "password": password})

    def logout(self) -> ApiResult:
        return self.fetch_data("/logout", "post")

    def get_protected(self) -> ApiResult:
        return self.fetch_data("/protected", "get")

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cookieauth.client.api import ApiClient, ApiResult

LOGIN = "Login"
LOGOUT = "Logout"
GET_PROTECTED = "Get protected data"


class ClientShell:
    """View state behind the single-page client.

    ``is_logged_in`` follows the outcome of the latest server call, so a
    ``401`` from the protected route logs the view out even if the token
    expired on its own.
    """

    def __init__(self, api: ApiClient, *, alert: Callable[[str], Any]) -> None:
        self._api = api
        self._alert = alert
        self.is_logged_in = False
        self.data: dict[str, Any] | None = None

    def actions(self) -> list[str]:
        buttons = [LOGOUT] if self.is_logged_in else [LOGIN]
        buttons.append(GET_PROTECTED)
        return buttons

    def handle_login(self, username: str, password: str) -> None:
        result = self._api.login(username, password)
        if self._report(result):
            return
        self.is_logged_in = True

    def handle_logout(self) -> None:
        result = self._api.logout()
        if self._report(result):
            return
        self.is_logged_in = False

    def handle_protected(self) -> None:
        result = self._api.get_protected()
        if result.unauthorized:
            self.is_logged_in = False
        if self._report(result):
            return
        self.data = result.data

    def _report(self, result: ApiResult) -> bool:
        if result.error is None:
            return False
        self._alert(result.error)
        return True

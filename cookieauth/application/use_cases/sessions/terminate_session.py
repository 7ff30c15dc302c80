"""Use-case for ending a browser session."""

from __future__ import annotations

from cookieauth.domain.sessions.entities import CookieDirective


class TerminateSessionUseCase:
    def __init__(self, *, cookie_name: str = "token") -> None:
        self._cookie_name = cookie_name

    def execute(self) -> CookieDirective:
        # Tokens are stateless; a copy kept elsewhere stays valid until it expires.
        return CookieDirective.expire(self._cookie_name)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping

from cookieauth.domain.sessions.entities import SessionClaims
from cookieauth.domain.sessions.exceptions import UnauthenticatedError
from cookieauth.domain.sessions.ports import TokenCodec
from cookieauth.shared.logging import logger


class AuthorizeRequestUseCase:
    def __init__(self, *, codec: TokenCodec, cookie_name: str = "token") -> None:
        self._codec = codec
        self._cookie_name = cookie_name

    def execute(self, cookies: Mapping[str, str]) -> SessionClaims:
        token = cookies.get(self._cookie_name, "")
        if not token:
            logger.info(f"session.guard: no {self._cookie_name!r} cookie presented")
            raise UnauthenticatedError()

        claims = self._codec.decode(token)
        logger.debug(f"session.guard: ok username={claims.username!r}")
        return claims

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from cookieauth.domain.sessions.entities import (
    CookieDirective,
    Credential,
    IssuedSession,
    SessionClaims,
)
from cookieauth.domain.sessions.exceptions import InvalidCredentialsError
from cookieauth.domain.sessions.ports import Clock, TokenCodec
from cookieauth.shared.logging import logger


def utc_now() -> datetime:
    return datetime.now(UTC)


class IssueSessionUseCase:
    def __init__(
        self,
        *,
        codec: TokenCodec,
        admin: Credential,
        ttl: timedelta = timedelta(hours=1),
        cookie_name: str = "token",
        clock: Clock = utc_now,
    ) -> None:
        self._codec = codec
        self._admin = admin
        self._ttl = ttl
        self._cookie_name = cookie_name
        self._clock = clock

    def execute(self, username: str, password: str) -> IssuedSession:
        if not self._admin.matches(Credential(username=username, password=password)):
            logger.info(f"session.issue: rejected username={username!r}")
            raise InvalidCredentialsError()

        # JWT timestamps have second resolution.
        issued_at = self._clock().replace(microsecond=0)
        claims = SessionClaims(
            username=username,
            issued_at=issued_at,
            expires_at=issued_at + self._ttl,
        )
        token = self._codec.encode(claims)

        logger.info(
            f"session.issue: ok username={username!r} exp={claims.expires_at.isoformat()}"
        )
        return IssuedSession(
            claims=claims,
            token=token,
            cookie=CookieDirective.set(self._cookie_name, token),
        )

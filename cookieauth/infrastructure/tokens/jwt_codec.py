# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import jwt

from cookieauth.domain.sessions.entities import SessionClaims
from cookieauth.domain.sessions.exceptions import InvalidTokenError
from cookieauth.domain.sessions.ports import TokenCodec
from cookieauth.shared.logging import logger


class PyJwtTokenCodec(TokenCodec):
    """Signs and verifies session claims as compact JWS tokens."""

    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        leeway: timedelta | float = 0,
        required_claims: Sequence[str] = ("sub", "iat", "exp"),
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._leeway = leeway
        self._required_claims = list(required_claims)

    def encode(self, claims: SessionClaims) -> str:
        payload = {
            "sub": claims.username,
            "iat": claims.issued_at,
            "exp": claims.expires_at,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                leeway=self._leeway,
                options={"require": self._required_claims},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.info("session.token: expired")
            raise InvalidTokenError() from exc
        except jwt.InvalidTokenError as exc:
            logger.warning(f"session.token: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            logger.warning("session.token: rejected (empty subject)")
            raise InvalidTokenError()

        return SessionClaims(
            username=username,
            issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=UTC),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=UTC),
        )


__all__ = ["PyJwtTokenCodec"]

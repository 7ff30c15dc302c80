# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac
from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Credential:

    username: str
    password: str

    def matches(self, other: Credential) -> bool:
        # Both comparisons always run so timing does not reveal which half differed.
        username_ok = hmac.compare_digest(self.username.encode(), other.username.encode())
        password_ok = hmac.compare_digest(self.password.encode(), other.password.encode())
        return username_ok and password_ok

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


@dataclass(slots=True, frozen=True)
class SessionClaims:

    username: str
    issued_at: datetime
    expires_at: datetime

    @property
    def lifetime_seconds(self) -> float:
        return (self.expires_at - self.issued_at).total_seconds()


@dataclass(slots=True, frozen=True)
class CookieDirective:
    """What the transport layer must do with the session cookie."""

    name: str
    value: str = ""
    http_only: bool = True
    clear: bool = False

    @classmethod
    def set(cls, name: str, value: str) -> CookieDirective:
        return cls(name=name, value=value)

    @classmethod
    def expire(cls, name: str) -> CookieDirective:
        return cls(name=name, clear=True)

    def __repr__(self) -> str:
        action = "clear" if self.clear else "set"
        return f"CookieDirective({action} {self.name!r})"


@dataclass(slots=True, frozen=True)
class IssuedSession:

    claims: SessionClaims
    token: str
    cookie: CookieDirective

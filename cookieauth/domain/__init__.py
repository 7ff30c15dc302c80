# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sessions.entities import Credential, CookieDirective, IssuedSession, SessionClaims
from .sessions.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthenticatedError,
)
from .sessions.ports import Clock, TokenCodec

__all__ = [
    "Clock",
    "CookieDirective",
    "Credential",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "IssuedSession",
    "SessionClaims",
    "TokenCodec",
    "UnauthenticatedError",
]

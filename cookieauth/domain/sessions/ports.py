# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import SessionClaims


class TokenCodec(Protocol):
    def encode(self, claims: SessionClaims) -> str: ...

    def decode(self, token: str) -> SessionClaims:
        """Return the verified claims or raise ``InvalidTokenError``."""
        ...


class Clock(Protocol):
    def __call__(self) -> datetime: ...

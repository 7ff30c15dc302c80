# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Response

from cookieauth.domain.sessions.entities import CookieDirective
from cookieauth.shared.config import SecurityConfig


def apply_cookie_directive(
    response: Response, directive: CookieDirective, security: SecurityConfig
) -> Response:
    if directive.clear:
        response.delete_cookie(
            directive.name,
            httponly=directive.http_only,
            samesite=security.cookie_samesite,
            secure=security.cookie_secure,
        )
        return response

    # No max_age/expires: the browser keeps it for the session only.
    response.set_cookie(
        directive.name,
        directive.value,
        httponly=directive.http_only,
        samesite=security.cookie_samesite,
        secure=security.cookie_secure,
    )
    return response


__all__ = ["apply_cookie_directive"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from cookieauth.application.use_cases.sessions.authorize_request import (
    AuthorizeRequestUseCase,
)


def session_required(authorize: AuthorizeRequestUseCase) -> Callable:
    """Build a view decorator that admits only requests with a valid session cookie.

    Rejections are raised as domain errors and rendered by the app's error
    handler as ``401`` JSON responses.
    """

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*args: Any, **kwargs: Any):
            g.session_claims = authorize.execute(request.cookies)
            return f(*args, **kwargs)

        return inner

    return decorator


__all__ = ["session_required"]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from cookieauth.application.use_cases.sessions.authorize_request import (
    AuthorizeRequestUseCase,
)
from cookieauth.interfaces.http.dto.session import MessageDTO
from cookieauth.interfaces.http.guard import session_required

SECRET_DATA = "The secret data is: 42"


class ProtectedController:
    def __init__(self, *, authorize_use_case: AuthorizeRequestUseCase) -> None:
        self._authorize_use_case = authorize_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("protected", __name__)
        guarded = session_required(self._authorize_use_case)(self.protected)
        bp.add_url_rule("/protected", view_func=guarded, methods=["GET"])
        return bp

    def protected(self):
        return jsonify(MessageDTO(message=SECRET_DATA).model_dump())

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from cookieauth.interfaces.http.dto.session import MessageDTO


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        return bp

    def index(self):
        return jsonify(MessageDTO(message="Hello World").model_dump())

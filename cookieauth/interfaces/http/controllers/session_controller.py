# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from cookieauth.application.use_cases.sessions.issue_session import IssueSessionUseCase
from cookieauth.application.use_cases.sessions.terminate_session import (
    TerminateSessionUseCase,
)
from cookieauth.interfaces.http.cookies import apply_cookie_directive
from cookieauth.interfaces.http.dto.session import LoginRequestDTO, MessageDTO
from cookieauth.shared.config import SecurityConfig
from cookieauth.shared.logging import logger
from cookieauth.shared.middleware.request_logger import get_client_ip


class SessionController:
    def __init__(
        self,
        *,
        issue_use_case: IssueSessionUseCase,
        terminate_use_case: TerminateSessionUseCase,
        security: SecurityConfig,
    ) -> None:
        self._issue_use_case = issue_use_case
        self._terminate_use_case = terminate_use_case
        self._security = security

    def login(self) -> tuple[Response, int]:
        body = request.get_json(silent=True)
        dto = LoginRequestDTO.model_validate(body if isinstance(body, dict) else {})

        session = self._issue_use_case.execute(dto.username, dto.password)

        response = jsonify(MessageDTO(message="Login successful").model_dump())
        apply_cookie_directive(response, session.cookie, self._security)
        logger.info(f"auth.login: ok username={dto.username!r} ip={get_client_ip()}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        directive = self._terminate_use_case.execute()

        response = jsonify(MessageDTO(message="Logout successful").model_dump())
        apply_cookie_directive(response, directive, self._security)
        logger.info(f"auth.logout: ok ip={get_client_ip()}")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("session", __name__)
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp

"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from cookieauth.application.use_cases.sessions.authorize_request import (
    AuthorizeRequestUseCase,
)
from cookieauth.application.use_cases.sessions.issue_session import IssueSessionUseCase
from cookieauth.application.use_cases.sessions.terminate_session import (
    TerminateSessionUseCase,
)
from cookieauth.domain.sessions.entities import Credential
from cookieauth.infrastructure.tokens.jwt_codec import PyJwtTokenCodec
from cookieauth.interfaces.http.controllers.misc_controller import MiscController
from cookieauth.interfaces.http.controllers.protected_controller import (
    ProtectedController,
)
from cookieauth.interfaces.http.controllers.session_controller import SessionController
from cookieauth.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def token_codec(self) -> PyJwtTokenCodec:
        token = self.config.token
        return PyJwtTokenCodec(
            secret=token.secret_key,
            algorithm=token.algorithm,
            leeway=timedelta(seconds=token.leeway_seconds),
            required_claims=token.required_claims,
        )

    @cached_property
    def admin_credential(self) -> Credential:
        return Credential(
            username=self.config.admin.username,
            password=self.config.admin.password,
        )

    @cached_property
    def issue_session_use_case(self) -> IssueSessionUseCase:
        return IssueSessionUseCase(
            codec=self.token_codec,
            admin=self.admin_credential,
            ttl=timedelta(seconds=self.config.token.ttl_seconds),
            cookie_name=self.config.token.cookie_name,
        )

    @cached_property
    def authorize_request_use_case(self) -> AuthorizeRequestUseCase:
        return AuthorizeRequestUseCase(
            codec=self.token_codec,
            cookie_name=self.config.token.cookie_name,
        )

    @cached_property
    def terminate_session_use_case(self) -> TerminateSessionUseCase:
        return TerminateSessionUseCase(cookie_name=self.config.token.cookie_name)

    @cached_property
    def session_controller(self) -> SessionController:
        return SessionController(
            issue_use_case=self.issue_session_use_case,
            terminate_use_case=self.terminate_session_use_case,
            security=self.config.security,
        )

    @cached_property
    def protected_controller(self) -> ProtectedController:
        return ProtectedController(authorize_use_case=self.authorize_request_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()

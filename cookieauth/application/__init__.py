# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.sessions.authorize_request import AuthorizeRequestUseCase
from .use_cases.sessions.issue_session import IssueSessionUseCase
from .use_cases.sessions.terminate_session import TerminateSessionUseCase

__all__ = [
    "AuthorizeRequestUseCase",
    "IssueSessionUseCase",
    "TerminateSessionUseCase",
]

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator


class LoginRequestDTO(BaseModel):
    # No format rules: anything but the configured pair is simply rejected.
    username: str = ""
    password: str = ""

    @field_validator("username", "password", mode="before")
    @classmethod
    def _non_strings_never_match(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class MessageDTO(BaseModel):
    message: str

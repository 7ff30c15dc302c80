# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)

_INSECURE_SECRETS = ("secret", "dev", "development", "test", "")

_SECTION_FIELDS = ("token", "admin", "security", "client")


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class TokenConfig(BaseSettings):
    secret_key: str = Field("secret", alias="JWT_SECRET")
    algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    ttl_seconds: int = Field(3600, ge=1, alias="JWT_TTL_SECONDS")
    leeway_seconds: float = Field(0.0, ge=0.0, alias="JWT_LEEWAY_SECONDS")
    cookie_name: str = Field("token", min_length=1, alias="SESSION_COOKIE_NAME")
    required_claims: tuple[str, ...] = ("sub", "iat", "exp")

    model_config = _SECTION_CONFIG


class AdminConfig(BaseSettings):
    username: str = Field("admin", alias="ADMIN_USERNAME")
    password: str = Field("password", alias="ADMIN_PASSWORD")

    model_config = _SECTION_CONFIG


class SecurityConfig(BaseSettings):
    # Cookie security
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str | None = Field(None, alias="COOKIE_SAMESITE")

    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["http://localhost:5173"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SECTION_CONFIG

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cookie_secure", "enable_hsts", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @field_validator("cookie_samesite", mode="before")
    @classmethod
    def _parse_samesite(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ClientConfig(BaseSettings):
    api_url: str = Field("http://localhost:3010", alias="API_URL")
    timeout: float | None = Field(None, gt=0, alias="API_TIMEOUT")

    model_config = _SECTION_CONFIG


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("127.0.0.1", alias="APP_HOST")
    port: int = Field(3010, ge=1, le=65535, alias="APP_PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    # Sections read their own variables; NoDecode keeps a bare TOKEN/ADMIN/... value
    # from being parsed as JSON, and _ignore_plain_env_values drops it.
    token: Annotated[TokenConfig, NoDecode] = Field(default_factory=TokenConfig)
    admin: Annotated[AdminConfig, NoDecode] = Field(default_factory=AdminConfig)
    security: Annotated[SecurityConfig, NoDecode] = Field(default_factory=SecurityConfig)
    client: Annotated[ClientConfig, NoDecode] = Field(default_factory=ClientConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator(*_SECTION_FIELDS, mode="before")
    @classmethod
    def _ignore_plain_env_values(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str):
            return cls.model_fields[info.field_name].default_factory()
        return value

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.token.secret_key in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if not self.security.cookie_secure:
            warnings.append("⚠️  Cookie Secure flag is DISABLED (use HTTPS!)")
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if (self.admin.username, self.admin.password) == ("admin", "password"):
            warnings.append("⚠️  Default admin credentials are in use")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AdminConfig",
    "AppConfig",
    "ClientConfig",
    "SecurityConfig",
    "TokenConfig",
    "load_config",
]

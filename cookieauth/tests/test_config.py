from __future__ import annotations

import pytest

from cookieauth.shared.config import AppConfig, SecurityConfig, TokenConfig


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "APP_ENV",
        "JWT_SECRET",
        "JWT_TTL_SECONDS",
        "ALLOWED_ORIGINS",
        "ADMIN_USERNAME",
        "ADMIN_PASSWORD",
        "COOKIE_SAMESITE",
        "TOKEN",
        "ADMIN",
        "SECURITY",
        "CLIENT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_demo_constants() -> None:
    config = AppConfig()

    assert config.port == 3010
    assert config.token.secret_key == "secret"
    assert config.token.algorithm == "HS256"
    assert config.token.ttl_seconds == 3600
    assert config.token.cookie_name == "token"
    assert config.admin.username == "admin"
    assert config.admin.password == "password"
    assert config.security.allowed_origins == ["http://localhost:5173"]
    assert config.security.cookie_samesite is None
    assert config.client.api_url == "http://localhost:3010"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-env-secret-0123456789abcdef")
    monkeypatch.setenv("JWT_TTL_SECONDS", "60")
    monkeypatch.setenv("ADMIN_USERNAME", "root")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    config = AppConfig()

    assert config.token.secret_key == "from-env-secret-0123456789abcdef"
    assert config.token.ttl_seconds == 60
    assert config.admin.username == "root"
    assert config.security.allowed_origins == ["http://a.test", "http://b.test"]


def test_dotenv_file_is_read(tmp_path) -> None:
    (tmp_path / ".env").write_text("JWT_SECRET=dotenv-secret-0123456789abcdefghij\nUNRELATED=1\n")

    assert TokenConfig().secret_key == "dotenv-secret-0123456789abcdefghij"


def test_blank_samesite_means_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COOKIE_SAMESITE", "")

    assert SecurityConfig().cookie_samesite is None


def test_production_refuses_default_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_accepts_strong_secret(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", "a-long-random-production-secret")

    config = AppConfig()

    assert config.is_production()
    assert "Default admin credentials are in use" in capsys.readouterr().err


def test_env_vars_named_like_sections_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOKEN", "abc")
    monkeypatch.setenv("ADMIN", "root")
    monkeypatch.setenv("SECURITY", '{"cookie_secure": true}')
    monkeypatch.setenv("CLIENT", "http://elsewhere.test")

    config = AppConfig()

    assert config.token.secret_key == "secret"
    assert config.admin.username == "admin"
    assert config.security.cookie_secure is False
    assert config.client.api_url == "http://localhost:3010"

from __future__ import annotations

import base64

import pytest
from pydantic import ValidationError

from expense_tracker.shared.config.settings import (
    DEV_JWT_SECRET,
    AppConfig,
    JwtConfig,
    SecurityConfig,
)


def test_jwt_key_bytes_decodes_secret() -> None:
    raw = b"s" * 48
    config = JwtConfig(JWT_SECRET=base64.b64encode(raw).decode())

    assert config.key_bytes() == raw


@pytest.mark.parametrize("secret", ["not base64!", base64.b64encode(b"short").decode()])
def test_jwt_secret_must_be_long_base64(secret: str) -> None:
    with pytest.raises(ValidationError):
        JwtConfig(JWT_SECRET=secret)


def test_default_expiration_is_one_day() -> None:
    assert JwtConfig().expiration_ms == 86_400_000


def test_allowed_origins_from_comma_list(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

    assert SecurityConfig().allowed_origins == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize(("raw", "expected"), [("true", True), ("1", True), ("no", False)])
def test_hsts_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("ENABLE_HSTS", raw)

    assert SecurityConfig().enable_hsts is expected


def test_production_refuses_development_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_accepts_real_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    secret = base64.b64encode(b"p" * 32).decode()
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("JWT_SECRET", secret)

    config = AppConfig()

    assert config.is_production()
    assert config.jwt.secret == secret != DEV_JWT_SECRET

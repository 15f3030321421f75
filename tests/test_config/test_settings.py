"""Testes para config.settings (base e whatsapp)."""

from __future__ import annotations

import pytest

from config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    BaseSettings,
    WhatsAppSettings,
    get_base_settings,
    get_whatsapp_settings,
)


class TestWhatsAppSettings:
    """Testes para WhatsAppSettings."""

    def test_defaults(self) -> None:
        settings = WhatsAppSettings()
        assert settings.api_version == GRAPH_API_VERSION == "v24.0"
        assert settings.api_base_url == GRAPH_API_BASE_URL
        assert settings.token_type == "Bearer"
        assert settings.request_timeout_seconds == 30.0

    def test_api_endpoint(self) -> None:
        settings = WhatsAppSettings(api_base_url="https://graph.facebook.com/")
        assert settings.api_endpoint == "https://graph.facebook.com/v24.0"

    def test_validate_ok(self) -> None:
        assert WhatsAppSettings(access_token="t", phone_number_id="1").validate() == []

    def test_validate_errors(self) -> None:
        settings = WhatsAppSettings(
            api_version="latest", token_type="Basic", request_timeout_seconds=0
        )
        errors = settings.validate()
        assert len(errors) == 5

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("WHATSAPP_PHONE_NUMBER_ID", "42")
        monkeypatch.setenv("WHATSAPP_API_VERSION", "v21.0")
        monkeypatch.setenv("WHATSAPP_TOKEN_TYPE", "OAuth")
        monkeypatch.setenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "5")

        settings = get_whatsapp_settings()

        assert settings.access_token == "tok"
        assert settings.phone_number_id == "42"
        assert settings.api_version == "v21.0"
        assert settings.token_type == "OAuth"
        assert settings.request_timeout_seconds == 5.0

    def test_cached(self) -> None:
        assert get_whatsapp_settings() is get_whatsapp_settings()


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("SERVICE_NAME", "outbound-worker")

        settings = get_base_settings()

        assert settings.log_level == "DEBUG"
        assert settings.service_name == "outbound-worker"

    def test_validate_invalid_level(self) -> None:
        errors = BaseSettings(log_level="LOUD", service_name="").validate()
        assert errors == ["LOG_LEVEL inválido: LOUD", "SERVICE_NAME não pode ser vazio"]

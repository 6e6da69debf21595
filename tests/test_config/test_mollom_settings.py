"""Testes de config.settings.mollom."""

from __future__ import annotations

import pytest

from config.settings import MOLLOM_API_VERSION, MollomSettings, get_mollom_settings
from mollom.infra.servers import DEFAULT_SERVERS


class TestMollomSettings:
    """Testes de MollomSettings."""

    def test_defaults(self) -> None:
        settings = MollomSettings()
        assert settings.api_version == MOLLOM_API_VERSION == "1.0"
        assert settings.servers == DEFAULT_SERVERS
        assert settings.max_refreshes == 3
        assert settings.has_credentials is False

    def test_valid_settings(self) -> None:
        settings = MollomSettings(public_key="p", private_key="s")
        assert settings.validate() == []
        assert settings.has_credentials is True

    def test_reports_all_errors(self) -> None:
        settings = MollomSettings(
            servers=(),
            request_timeout_seconds=0,
            max_refreshes=-1,
            log_level="LOUD",
        )
        errors = settings.validate()
        assert "MOLLOM_PUBLIC_KEY não configurado" in errors
        assert "MOLLOM_PRIVATE_KEY não configurado" in errors
        assert "MOLLOM_SERVERS não pode ser vazio" in errors
        assert "MOLLOM_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors
        assert "MOLLOM_MAX_REFRESHES deve ser >= 0" in errors
        assert "LOG_LEVEL inválido: LOUD" in errors

    def test_is_frozen(self) -> None:
        settings = MollomSettings()
        with pytest.raises(AttributeError):
            settings.public_key = "x"  # type: ignore[misc]


class TestGetMollomSettings:
    """Testes de get_mollom_settings."""

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MOLLOM_PUBLIC_KEY", "pub")
        monkeypatch.setenv("MOLLOM_PRIVATE_KEY", "priv")
        monkeypatch.setenv("MOLLOM_SERVERS", "http://a.test,,http://b.test ")
        monkeypatch.setenv("MOLLOM_REQUEST_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("MOLLOM_MAX_REFRESHES", "1")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_mollom_settings()

        assert settings.public_key == "pub"
        assert settings.private_key == "priv"
        assert settings.servers == ("http://a.test", "http://b.test")
        assert settings.request_timeout_seconds == 2.5
        assert settings.max_refreshes == 1
        assert settings.log_level == "DEBUG"

    def test_blank_servers_keep_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MOLLOM_SERVERS", " , ")
        assert get_mollom_settings().servers == DEFAULT_SERVERS

    def test_is_cached(self) -> None:
        assert get_mollom_settings() is get_mollom_settings()

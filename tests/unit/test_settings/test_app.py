"""Unit tests for environment settings."""

from pathlib import Path

import pytest

from src.settings.app import AppSettings, get_settings


class TestAppSettings:
    """Tests for AppSettings."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without environment overrides defaults apply."""
        monkeypatch.delenv("MACRO_DIGEST_CONFIG", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_JSON", raising=False)

        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]

        assert settings.config_path is None
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    @pytest.mark.unit
    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables are read."""
        monkeypatch.setenv("MACRO_DIGEST_CONFIG", "/etc/relevance.yaml")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_JSON", "true")

        settings = get_settings()

        assert settings.config_path == Path("/etc/relevance.yaml")
        assert settings.log_level == "debug"
        assert settings.log_json is True

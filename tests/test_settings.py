"""Tests for environment-driven configuration (settings.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from kodik_client.core.models import KodikVideo
from kodik_client.exceptions import ConfigurationError
from kodik_client.settings import KodikSettings, get_settings


class TestDefaults:
    def test_defaults(self) -> None:
        settings = KodikSettings()
        assert settings.token == ""
        assert settings.scheme == "https"
        assert settings.host == "kodikapi.com"
        assert settings.base_path == ""
        assert settings.origin == "kodik"
        assert settings.timeout == 10.0
        assert settings.cache_path is None


class TestEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KODIK_TOKEN", "abc")
        monkeypatch.setenv("KODIK_HOST", "mirror.example/")
        monkeypatch.setenv("KODIK_TIMEOUT", "2.5")
        monkeypatch.setenv("KODIK_CACHE_PATH", "/tmp/tokens.json")

        settings = KodikSettings()

        assert settings.token == "abc"
        assert settings.host == "mirror.example"
        assert settings.timeout == 2.5
        assert settings.cache_path == Path("/tmp/tokens.json")

    def test_reads_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("KODIK_TOKEN=from-file\n", encoding="utf-8")
        assert KodikSettings().token == "from-file"

    def test_invalid_value_raises_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KODIK_TIMEOUT", "-1")
        with pytest.raises(ConfigurationError, match="Invalid Kodik settings"):
            get_settings()

    def test_empty_host_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KODIK_HOST", "/")
        with pytest.raises(ConfigurationError):
            get_settings()

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestToSourceConfig:
    def test_builds_source_config(self) -> None:
        settings = KodikSettings(token=" abc ", origin="mirror")
        config = settings.to_source_config()

        assert config.token == "abc"
        assert config.origin == "mirror"
        assert config.host == "kodikapi.com"
        assert config.video_factory == KodikVideo.from_record

    def test_custom_factory(self) -> None:
        def factory(record: dict) -> str:
            return "video"

        config = KodikSettings(token="abc").to_source_config(factory)
        assert config.video_factory is factory

    def test_missing_token_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="token is not configured") as exc_info:
            KodikSettings().to_source_config()
        assert exc_info.value.hint is not None
        assert "KODIK_TOKEN" in exc_info.value.hint

import pytest

from awesomebar.config import DEFAULT_HISTORY_SUGGESTION_LIMIT, ProviderConfig, Settings, load_settings
from awesomebar.errors import ConfigurationError


class TestProviderConfig:

    def test_default_limit(self):
        assert ProviderConfig().max_number_of_suggestions == DEFAULT_HISTORY_SUGGESTION_LIMIT == 20

    def test_create_rejects_non_positive_limit(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ProviderConfig.create(max_number_of_suggestions=0)

        assert exc_info.value.details == {"values": {"max_number_of_suggestions": 0}}
        assert exc_info.value.original_error is not None

    def test_config_is_frozen(self):
        config = ProviderConfig(max_number_of_suggestions=5)
        with pytest.raises(Exception):
            config.max_number_of_suggestions = 6

    def test_from_settings(self):
        settings = Settings(AWESOMEBAR_MAX_SUGGESTIONS=7)
        assert ProviderConfig.from_settings(settings).max_number_of_suggestions == 7


class TestSettings:

    def test_load_settings_defaults(self, monkeypatch):
        monkeypatch.delenv("AWESOMEBAR_MAX_SUGGESTIONS", raising=False)
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)

        settings = load_settings()

        assert settings.AWESOMEBAR_MAX_SUGGESTIONS == 20
        assert settings.OTEL_EXPORTER_OTLP_ENDPOINT is None

    def test_load_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("AWESOMEBAR_MAX_SUGGESTIONS", "12")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = load_settings()

        assert settings.AWESOMEBAR_MAX_SUGGESTIONS == 12
        assert settings.LOG_LEVEL == "DEBUG"

    def test_load_settings_invalid_env(self, monkeypatch):
        monkeypatch.setenv("AWESOMEBAR_MAX_SUGGESTIONS", "many")

        with pytest.raises(ConfigurationError):
            load_settings()

"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings validation and defaults
- Settings class initialization
"""

from infrastructure.configuration import I18nSettings, Settings


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_i18n_settings_defaults(self, monkeypatch):
        for variable in (
            "I18N_LANGUAGE",
            "I18N_BASELINE_LOCALE",
            "I18N_TRANSLATIONS_DIR",
            "I18N_TRANSLATIONS_URL",
            "I18N_HTTP_TIMEOUT_SECONDS",
        ):
            monkeypatch.delenv(variable, raising=False)

        i18n = I18nSettings()

        assert i18n.LANGUAGE is None
        assert i18n.BASELINE_LOCALE == "en"
        assert i18n.TRANSLATIONS_DIR is None
        assert i18n.TRANSLATIONS_URL is None
        assert i18n.HTTP_TIMEOUT_SECONDS == 10.0

    def test_i18n_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("I18N_LANGUAGE", "fr")
        monkeypatch.setenv("I18N_BASELINE_LOCALE", "en-US")
        monkeypatch.setenv("I18N_TRANSLATIONS_URL", "https://translations.example")
        monkeypatch.setenv("I18N_HTTP_TIMEOUT_SECONDS", "2.5")

        i18n = I18nSettings()

        assert i18n.LANGUAGE == "fr"
        assert i18n.BASELINE_LOCALE == "en-US"
        assert i18n.TRANSLATIONS_URL == "https://translations.example"
        assert i18n.HTTP_TIMEOUT_SECONDS == 2.5


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_instantiates_sections(self):
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)

    def test_settings_accepts_section_override(self, monkeypatch):
        monkeypatch.setenv("I18N_LANGUAGE", "sw")
        settings = Settings(i18n=I18nSettings())
        assert settings.i18n.LANGUAGE == "sw"

    def test_is_production_without_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

"""Tests for settings and buyer-country resolution."""

from carbon_lens.config import Settings, country_from_locale, resolve_user_country


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("CARBON_LENS_USER_COUNTRY", "fr")
    monkeypatch.setenv("CARBON_LENS_LOG_LEVEL", "debug")
    monkeypatch.setenv("FRONTEND_ORIGINS", "https://a.example, https://b.example,")

    settings = Settings.from_env()

    assert settings.default_user_country == "FR"
    assert settings.log_level == "DEBUG"
    assert settings.frontend_origins == ("https://a.example", "https://b.example")


def test_settings_from_env_defaults(monkeypatch):
    monkeypatch.delenv("CARBON_LENS_USER_COUNTRY", raising=False)
    monkeypatch.setenv("CARBON_LENS_LOG_LEVEL", "chatty")
    monkeypatch.delenv("FRONTEND_ORIGINS", raising=False)

    settings = Settings.from_env()

    assert settings.default_user_country is None
    assert settings.log_level == "WARNING"
    assert settings.frontend_origins == ("*",)


def test_country_from_locale():
    assert country_from_locale("fr_FR.UTF-8") == "FR"
    assert country_from_locale("en-GB") == "GB"
    assert country_from_locale("de_DE@euro") == "DE"
    assert country_from_locale("C") is None
    assert country_from_locale(None) is None


def test_resolve_prefers_explicit_code():
    assert resolve_user_country("de", Settings(default_user_country="FR")) == "DE"


def test_resolve_ignores_invalid_explicit_code():
    assert resolve_user_country("Germany", Settings(default_user_country="FR")) == "FR"


def test_resolve_reads_locale(monkeypatch):
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.setenv("LANG", "pt_BR.UTF-8")

    assert resolve_user_country(None, Settings()) == "BR"


def test_resolve_without_locale(monkeypatch):
    monkeypatch.setenv("LANG", "pt_BR.UTF-8")

    assert resolve_user_country(None, Settings(), use_locale=False) is None

from __future__ import annotations

from workshops.workshop1.app.config import Settings as RoutingSettings
from workshops.workshop4.app.config import Settings as PersistenceSettings


def test_environment_profiles_apply_defaults() -> None:
    dev = PersistenceSettings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True
    assert dev.db_echo is False

    test_profile = PersistenceSettings(environment="test")
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False

    ci_profile = PersistenceSettings(environment="ci")
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False


def test_environment_aliases_are_normalised() -> None:
    assert RoutingSettings(environment="DEV").environment == "development"
    assert RoutingSettings(environment="testing").environment == "test"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("WORKSHOP4_LOG_LEVEL", "error")
    overridden = PersistenceSettings(environment="test")
    assert overridden.log_level == "ERROR"

    monkeypatch.setenv("WORKSHOP4_DB_ECHO", "true")
    assert PersistenceSettings(environment="ci").db_echo is True


def test_workshops_read_their_own_prefix(monkeypatch) -> None:
    monkeypatch.setenv("WORKSHOP1_APP_PORT", "4100")
    monkeypatch.setenv("WORKSHOP4_APP_PORT", "4400")

    assert RoutingSettings().app_port == 4100
    assert PersistenceSettings().app_port == 4400


def test_defaults_listen_on_port_3000() -> None:
    settings = RoutingSettings(environment="test")
    assert settings.app_port == 3000
    assert settings.default_currency == "USD"


def test_invalid_same_site_falls_back_to_lax() -> None:
    assert PersistenceSettings(session_same_site="sideways").session_same_site == "lax"
    assert PersistenceSettings(session_same_site="Strict").session_same_site == "strict"

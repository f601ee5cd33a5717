"""
Configuration tests.
"""

import pytest

from captainslog.config import Settings, get_settings


def test_get_settings_returns_settings() -> None:
    """get_settings returns a Settings instance."""
    settings = get_settings()
    assert isinstance(settings, Settings)


def test_alert_defaults() -> None:
    settings = Settings()
    assert settings.app_name == "Captain's Log"
    assert settings.alert_lookahead_days == 30
    assert settings.alert_urgent_days == 3
    assert settings.alert_hours_lookahead == 50
    assert settings.alert_hours_urgent == 10
    assert settings.document_reminder_days == 30
    assert settings.digest_advance_notice_days == 14


def test_alert_thresholds_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALERT_HOURS_URGENT", "25")
    monkeypatch.setenv("ALERT_TIMEZONE", "Asia/Dubai")
    monkeypatch.setenv("DIGEST_ADVANCE_NOTICE_DAYS", "21")
    settings = Settings()
    assert settings.alert_hours_urgent == 25
    assert settings.alert_timezone == "Asia/Dubai"
    assert settings.digest_advance_notice_days == 21


def test_generic_postgres_url_gets_psycopg_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/captainslog")
    assert Settings().database_url == "postgresql+psycopg://u:p@db:5432/captainslog"


def test_base_url_trailing_slash_stripped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_BASE_URL", "https://boats.example.com/")
    assert Settings().app_base_url == "https://boats.example.com"


def test_cron_secret_from_env() -> None:
    from tests.test_constants import TEST_CRON_SECRET

    assert get_settings().cron_secret == TEST_CRON_SECRET

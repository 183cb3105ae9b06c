"""Tests for settings loading."""

import pytest

from payrun.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "DATABASE_URL",
        "DATA_SOURCE",
        "FAIL_FAST",
        "DISPOSITION_SEED",
        "LOG_LEVEL",
        "PORT",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env()

        assert settings.data_source == "fixtures"
        assert settings.fail_fast is False
        assert settings.disposition_seed is None
        assert settings.log_level == "INFO"
        assert settings.database_url.startswith("sqlite:///")
        assert settings.PORT == 8000

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("DATA_SOURCE", "Database")
        monkeypatch.setenv("FAIL_FAST", "true")
        monkeypatch.setenv("DISPOSITION_SEED", "42")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DEBUG", "TRUE")

        settings = Settings.from_env()

        assert settings.data_source == "database"
        assert settings.fail_fast is True
        assert settings.disposition_seed == 42
        assert settings.log_level == "DEBUG"
        assert settings.DEBUG is True

    def test_unknown_data_source(self, monkeypatch):
        monkeypatch.setenv("DATA_SOURCE", "spreadsheet")

        with pytest.raises(ValueError, match="DATA_SOURCE"):
            Settings.from_env()

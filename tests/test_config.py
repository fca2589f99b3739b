from __future__ import annotations

from persons_api.core import config as core_config


def test_settings_defaults(monkeypatch):
    for name in ("APP_ENV", "DATABASE_URL", "CSV_PATH", "SEED_ON_STARTUP", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.app_env == "dev"
        assert settings.database_url == "sqlite:///persons.db"
        assert settings.csv_path == str(core_config.DEFAULT_CSV_PATH)
        assert settings.seed_on_startup is True
        assert settings.log_level == "INFO"
    finally:
        core_config.get_settings.cache_clear()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("DATABASE_URL", " postgresql+psycopg://u:p@db/persons ")
    monkeypatch.setenv("SEED_ON_STARTUP", "no")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.app_env == "prod"
        assert settings.database_url == "postgresql+psycopg://u:p@db/persons"
        assert settings.seed_on_startup is False
        assert settings.log_level == "DEBUG"
    finally:
        core_config.get_settings.cache_clear()

"""Tests for settings loading."""

from pathlib import Path

from liteorm.config import DatabaseConfig, Settings, load_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.database.path == Path("liteorm.db")
    assert settings.database.foreign_keys is False
    assert settings.logging.level == "INFO"
    assert settings.logging.json_format is True


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LITEORM_DATABASE__PATH", str(tmp_path / "env.db"))
    monkeypatch.setenv("LITEORM_DATABASE__FOREIGN_KEYS", "true")
    monkeypatch.setenv("LITEORM_LOGGING__LEVEL", "DEBUG")

    settings = Settings()

    assert settings.database == DatabaseConfig(path=tmp_path / "env.db", foreign_keys=True)
    assert settings.logging.level == "DEBUG"


def test_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("LITEORM_LOGGING__JSON_FORMAT=false\n", encoding="utf-8")

    assert load_settings().logging.json_format is False

"""
全局配置测试
"""
from pathlib import Path

from config.settings import Settings


def test_settings_defaults(monkeypatch):
    for name in ("FSM_STRICT_INITIAL", "FSM_CONFIG_PATH", "LOG_LEVEL", "LOG_FORMAT", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.FSM_STRICT_INITIAL is False
    assert settings.FSM_CONFIG_PATH is None
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == "text"
    assert settings.LOG_FILE is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("FSM_STRICT_INITIAL", "true")
    monkeypatch.setenv("FSM_CONFIG_PATH", "configs/fsm.yaml")
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = Settings(_env_file=None)

    assert settings.FSM_STRICT_INITIAL is True
    assert settings.FSM_CONFIG_PATH == Path("configs/fsm.yaml")
    assert settings.LOG_FORMAT == "json"


def test_settings_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.LOG_LEVEL == "DEBUG"

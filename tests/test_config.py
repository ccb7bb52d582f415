"""Config tests"""

from pathlib import Path

import pytest

from todoapp import config as config_module
from todoapp.config import Config, default_storage_path, load_config
from todoapp.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in [
        "TODOAPP_STORAGE_PATH",
        "TODOAPP_FLASH_SECONDS",
        "TODOAPP_HOST",
        "TODOAPP_PORT",
        "LOG_LEVEL",
        "LOG_FILE",
        "TODOAPP_CLI_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_from_yaml(tmp_path):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text(
        "storage:\n"
        "  path: /data/todos.json\n"
        "status:\n"
        "  flash_seconds: 2.5\n"
        "server:\n"
        "  port: 9000\n"
        "log:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )

    config = Config.from_yaml(config_path)

    assert config.storage_path == Path("/data/todos.json")
    assert config.status.flash_seconds == 2.5
    assert config.server.host == "127.0.0.1"
    assert config.server.port == 9000
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/todoapp.log"


def test_env_overrides_yaml_storage_path(tmp_path, monkeypatch):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text("storage:\n  path: /data/todos.json\n", encoding="utf-8")
    monkeypatch.setenv("TODOAPP_STORAGE_PATH", str(tmp_path / "env.json"))

    assert Config.from_yaml(config_path).storage_path == tmp_path / "env.json"


def test_from_env(monkeypatch):
    monkeypatch.setenv("TODOAPP_FLASH_SECONDS", "0.5")
    monkeypatch.setenv("TODOAPP_PORT", "8123")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    config = Config.from_env()

    assert config.status.flash_seconds == 0.5
    assert config.server.port == 8123
    assert config.log_level == "WARNING"


def test_load_config_falls_back_to_env(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config.status.flash_seconds == 1.2
    assert config.storage_path == default_storage_path()


def test_default_storage_path_uses_xdg(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_storage_path() == tmp_path / "TodoApp" / "todos.json"


def test_default_storage_path_uses_appdata_on_windows(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module.sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert default_storage_path() == tmp_path / "TodoApp" / "todos.json"


def test_bundled_config_loads():
    config = Config.from_yaml()
    assert config.storage.path is None
    assert config.server.port == 8000


@pytest.mark.parametrize(
    "content",
    [
        "- storage\n- status\n",
        "just a string\n",
        "storage: /data/todos.json\n",
        "log:\n  - INFO\n",
        "storage: [unclosed\n",
    ],
)
def test_from_yaml_rejects_malformed_structure(tmp_path, content):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        Config.from_yaml(config_path)


def test_empty_yaml_uses_defaults(tmp_path):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text("", encoding="utf-8")

    config = Config.from_yaml(config_path)

    assert config.log_level == "INFO"
    assert config.cli_log_level == "WARNING"


def test_cli_log_level(tmp_path, monkeypatch):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text("log:\n  cli_level: ERROR\n", encoding="utf-8")
    assert Config.from_yaml(config_path).cli_log_level == "ERROR"

    monkeypatch.setenv("TODOAPP_CLI_LOG_LEVEL", "DEBUG")
    assert Config.from_yaml(config_path).cli_log_level == "DEBUG"
    assert Config.from_env().cli_log_level == "DEBUG"

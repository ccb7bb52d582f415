"""
設定管理モジュール

config/app_config.yaml があればそれを使い、なければ環境変数から読み込む。
TODOAPP_STORAGE_PATH は常に保存先を上書きする（テストやスクリプト用）。

関連クラス:
  - store.TodoStore: storage.path を使用
  - status.StatusLine: status.flash_seconds を使用
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError

APP_DIR_NAME = "TodoApp"
STORAGE_FILE_NAME = "todos.json"
STORAGE_PATH_ENV = "TODOAPP_STORAGE_PATH"


def user_config_dir() -> Path:
    """ユーザーごとのアプリデータディレクトリ（Windowsでは %APPDATA%）"""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def default_storage_path() -> Path:
    return user_config_dir() / APP_DIR_NAME / STORAGE_FILE_NAME


@dataclass
class StorageConfig:
    """Todoファイル設定"""

    path: Optional[str] = None

    def resolve(self) -> Path:
        """保存先パス（TODOAPP_STORAGE_PATH が最優先）"""
        env_path = os.getenv(STORAGE_PATH_ENV)
        if env_path:
            return Path(env_path).expanduser()
        if self.path:
            return Path(self.path).expanduser()
        return default_storage_path()


@dataclass
class StatusConfig:
    """ステータス行設定"""

    flash_seconds: float = 1.2


@dataclass
class ServerConfig:
    """ローカルHTTPサーバー設定"""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class Config:
    """アプリケーション設定クラス"""

    storage: StorageConfig = None  # type: ignore
    status: StatusConfig = None  # type: ignore
    server: ServerConfig = None  # type: ignore

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/todoapp.log"
    cli_log_level: str = "WARNING"  # CLI実行時のログレベル

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.storage is None:
            self.storage = StorageConfig()
        if self.status is None:
            self.status = StatusConfig()
        if self.server is None:
            self.server = ServerConfig()

    @property
    def storage_path(self) -> Path:
        return self.storage.resolve()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス

        Raises:
            ConfigError: YAMLとして解析できない、またはトップレベルや各セクションがマッピングでない場合
        """
        if config_path is None:
            config_path = default_config_path()

        with open(config_path, "r", encoding="utf-8") as f:
            try:
                yaml_data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(f"設定ファイルを解析できません: {config_path}") from exc

        if yaml_data is None:
            yaml_data = {}
        if not isinstance(yaml_data, dict):
            raise ConfigError(f"設定ファイルの形式が不正です（マッピングではありません）: {config_path}")

        storage_data = _section(yaml_data, "storage", config_path)
        status_data = _section(yaml_data, "status", config_path)
        server_data = _section(yaml_data, "server", config_path)
        log_data = _section(yaml_data, "log", config_path)

        return cls(
            storage=StorageConfig(path=storage_data.get("path")),
            status=StatusConfig(
                flash_seconds=float(status_data.get("flash_seconds", 1.2)),
            ),
            server=ServerConfig(
                host=server_data.get("host", "127.0.0.1"),
                port=int(server_data.get("port", 8000)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/todoapp.log"),
            cli_log_level=os.getenv(
                "TODOAPP_CLI_LOG_LEVEL", log_data.get("cli_level", "WARNING")
            ),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """環境変数から設定を読み込む"""
        return cls(
            storage=StorageConfig(path=os.getenv(STORAGE_PATH_ENV)),
            status=StatusConfig(
                flash_seconds=float(os.getenv("TODOAPP_FLASH_SECONDS", "1.2")),
            ),
            server=ServerConfig(
                host=os.getenv("TODOAPP_HOST", "127.0.0.1"),
                port=int(os.getenv("TODOAPP_PORT", "8000")),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/todoapp.log"),
            cli_log_level=os.getenv("TODOAPP_CLI_LOG_LEVEL", "WARNING"),
        )


def _section(yaml_data: Dict[str, Any], key: str, config_path: Path) -> Dict[str, Any]:
    value = yaml_data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"設定セクション '{key}' の形式が不正です: {config_path}")
    return value


def default_config_path() -> Path:
    project_root = Path(__file__).resolve().parents[2]
    return project_root / "config" / "app_config.yaml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """YAMLファイルがあればそれを、なければ環境変数から設定を読み込む"""
    path = Path(config_path) if config_path else default_config_path()
    if path.exists():
        return Config.from_yaml(path)
    return Config.from_env()

"""convention-checkerの設定管理。"""

from pathlib import Path
from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class CheckerConfig(BaseSettings):
    """チェッカー・MCPサーバー設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "CONVENTION_CHECKER_"}

    config_dir: Path = _REPO_ROOT / "config"
    log_level: LogLevel = "WARNING"
    report_format: Literal["text", "json"] = "text"

    # MCPサーバー
    host: str = "127.0.0.1"
    port: int = 8000
    url_token: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

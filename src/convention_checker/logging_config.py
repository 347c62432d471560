"""ロギング設定。"""

import logging
import sys
from datetime import datetime


class CheckerFormatter(logging.Formatter):
    """``[時刻] LEVEL [logger] message`` 形式のフォーマッタ。"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        parts = [f"[{timestamp}]", f"{record.levelname:8}", f"[{record.name}]", record.getMessage()]
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        return " ".join(parts)


def setup_logging(level: str = "WARNING") -> None:
    """パッケージロガーを設定する。

    標準出力はレポート用のため、ログは標準エラー出力に書き出す。
    """
    root_logger = logging.getLogger("convention_checker")
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CheckerFormatter())
    root_logger.addHandler(handler)

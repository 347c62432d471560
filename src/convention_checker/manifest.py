"""ファイル一覧マニフェスト（YAML/JSON）の読み込み。"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from convention_checker.models.convention import FileRecord
from convention_checker.models.errors import ManifestError
from convention_checker.validators.roles import infer_role


def records_from_entries(entries: list[dict[str, Any]]) -> list[FileRecord]:
    """``{"path": ..., "role": ...}`` のリストをFileRecordに変換する。

    ``role`` を省略したエントリはパスからロールを推論する。

    Raises:
        ValueError: エントリの形式が不正な場合。
    """
    records: list[FileRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or "path" not in entry:
            raise ValueError(f"entry {index} must be a mapping with 'path'")
        path = str(entry["path"])
        role = entry.get("role") or infer_role(path)
        records.append(FileRecord(path=path, declared_role=str(role)))
    return records


def load_manifest(manifest_file: Path) -> list[FileRecord]:
    """マニフェストファイルからファイル一覧を読み込む。

    Raises:
        ManifestError: ファイルが存在しない、または形式が不正な場合。
    """
    try:
        with open(manifest_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ManifestError(str(manifest_file), "file not found") from None
    except yaml.YAMLError as e:
        raise ManifestError(str(manifest_file), f"parse error: {e}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(str(manifest_file), f"cannot read file: {e}") from None

    if not isinstance(data, dict) or not isinstance(data.get("files"), list):
        raise ManifestError(str(manifest_file), "expected a mapping with a 'files' list")

    try:
        return records_from_entries(data["files"])
    except (ValidationError, ValueError) as e:
        raise ManifestError(str(manifest_file), str(e)) from None

"""規約チェック関連のデータモデル。"""

import re
from pathlib import PurePosixPath
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

FileRole = Literal[
    "app",
    "view",
    "view_model",
    "client_declaration",
    "client_live",
    "model",
    "extension",
    "resource",
    "supporting_file",
]

Severity = Literal["error", "warning"]

ViolationKind = Literal["unclassifiable", "directory", "filename", "pairing"]

# 推論できなかったファイルに付与するロール
UNKNOWN_ROLE = "unknown"


class Rule(BaseModel):
    """ファイルロールごとの構造規約（YAMLから読み込み）。"""

    model_config = ConfigDict(frozen=True)

    role: FileRole
    description: str
    expected_directories: tuple[str, ...]
    filename_pattern: str | None = None
    pairing: FileRole | None = None
    severity: Severity = "error"
    recommendation: str = ""

    @field_validator("filename_pattern")
    @classmethod
    def _compile_pattern(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"invalid filename_pattern {value!r}: {e}") from None
        return value

    def match_filename(self, name: str) -> re.Match[str] | None:
        """ファイル名がパターンに完全一致する場合にMatchを返す。"""
        if self.filename_pattern is None:
            return re.fullmatch(r".+", name)
        return re.fullmatch(self.filename_pattern, name)

    def base_name(self, name: str) -> str | None:
        """ペアリング判定に使うベース名を取得する。

        パターンに ``base`` グループがあればその値、なければ拡張子を除いた名前を返す。
        ファイル名がパターンに一致しない場合はNone。
        """
        match = self.match_filename(name)
        if match is None:
            return None
        if "base" in match.re.groupindex:
            return match.group("base")
        return PurePosixPath(name).stem


class FileRecord(BaseModel):
    """チェック対象の1ファイル。"""

    model_config = ConfigDict(frozen=True)

    path: str
    declared_role: str

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, value: str) -> str:
        normalized = PurePosixPath(value.replace("\\", "/").strip())
        if not normalized.name:
            raise ValueError(f"path has no file name: {value!r}")
        return normalized.as_posix().removeprefix("./")

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def directory(self) -> str:
        """親ディレクトリ。プロジェクトルートは ``"."``。"""
        return PurePosixPath(self.path).parent.as_posix()


class Violation(BaseModel):
    """規約違反の1件。"""

    file: FileRecord
    rule: Rule | None = None
    kind: ViolationKind
    severity: Severity = "error"
    reason: str
    recommendation: str = ""

    def to_summary(self) -> dict[str, str | None]:
        """ツール応答・JSONレポート用のフラットな辞書に変換する。"""
        return {
            "path": self.file.path,
            "declared_role": self.file.declared_role,
            "rule": self.rule.role if self.rule else None,
            "kind": self.kind,
            "severity": self.severity,
            "reason": self.reason,
            "recommendation": self.recommendation,
        }


class CheckSummary(BaseModel):
    """チェック結果の集計。"""

    violations: list[Violation] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == "warning")

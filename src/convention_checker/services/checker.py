"""規約チェックの実行を行うサービス。"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from convention_checker.manifest import records_from_entries
from convention_checker.models.convention import CheckSummary, FileRecord
from convention_checker.models.errors import ManifestError
from convention_checker.validators.conventions import ConventionValidator
from convention_checker.validators.roles import infer_role
from convention_checker.validators.rule_table import RuleTable

logger = logging.getLogger(__name__)


class CheckerService:
    """ルールテーブルとバリデータを束ね、ファイル一覧の規約チェックを行う。"""

    def __init__(self, config_dir: Path) -> None:
        self._rule_table = RuleTable(config_dir=config_dir)
        self._validator = ConventionValidator(self._rule_table)

    @property
    def rule_table(self) -> RuleTable:
        return self._rule_table

    def check_records(self, records: list[FileRecord]) -> CheckSummary:
        """FileRecordの一覧を検証する。"""
        return CheckSummary(violations=self._validator.validate(records))

    async def check_files(self, files: list[dict[str, Any]]) -> CheckSummary:
        """``{"path": ..., "role": ...}`` 形式のファイル一覧を検証する。

        Raises:
            ManifestError: ファイル一覧の形式が不正な場合。
        """
        try:
            records = records_from_entries(files)
        except (ValidationError, ValueError) as e:
            raise ManifestError("<request>", str(e)) from None
        summary = self.check_records(records)
        logger.info(
            "Checked %d files: %d errors, %d warnings",
            len(records),
            summary.error_count,
            summary.warning_count,
        )
        return summary

    async def infer_file_role(self, path: str) -> str:
        """ファイルパスからロールを推論する。"""
        return infer_role(path)

    async def list_rules(self) -> list[dict[str, Any]]:
        """ルールテーブルの内容を返す。"""
        return self._rule_table.to_dict()["rules"]

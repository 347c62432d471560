"""ファイル配置・命名規約のバリデーションロジック。"""

import fnmatch
import logging
from collections.abc import Iterable

from convention_checker.models.convention import FileRecord, Rule, Violation
from convention_checker.validators.rule_table import RuleTable

logger = logging.getLogger(__name__)


class ConventionValidator:
    """ルールテーブルに基づきファイル一覧の規約違反を検出する。"""

    def __init__(self, rule_table: RuleTable) -> None:
        self._rule_table = rule_table

    def validate(self, records: Iterable[FileRecord]) -> list[Violation]:
        """ファイル一覧を規約ルールに基づいて検証する。

        入力順に各ファイルを検査し、未知のロールも違反として記録して処理を続ける。

        Args:
            records: 検証対象のファイル一覧。

        Returns:
            検出された違反のリスト。問題がない場合は空リスト。
        """
        records = list(records)
        # (ディレクトリ, ロール) → ベース名の集合
        siblings = self._index_siblings(records)
        violations: list[Violation] = []

        for record in records:
            rule = self._rule_table.get(record.declared_role)
            if rule is None:
                violations.append(
                    Violation(
                        file=record,
                        kind="unclassifiable",
                        reason=f"{record.path}: 未知のロール '{record.declared_role}' のため分類できません",
                        recommendation=f"次のいずれかのロールを指定してください: {', '.join(self._rule_table.roles())}",
                    )
                )
                continue

            violations.extend(self._check_directory(record, rule))
            violations.extend(self._check_filename(record, rule))
            violations.extend(self._check_pairing(record, rule, siblings))

        logger.debug("Checked %d files, found %d violations", len(records), len(violations))
        return violations

    def _index_siblings(self, records: list[FileRecord]) -> dict[tuple[str, str], set[str]]:
        index: dict[tuple[str, str], set[str]] = {}
        for record in records:
            rule = self._rule_table.get(record.declared_role)
            if rule is None:
                continue
            base = rule.base_name(record.name)
            if base is not None:
                index.setdefault((record.directory, rule.role), set()).add(base)
        return index

    @staticmethod
    def _check_directory(record: FileRecord, rule: Rule) -> list[Violation]:
        """親ディレクトリが期待されるディレクトリに一致するかチェックする。"""
        if any(fnmatch.fnmatchcase(record.directory, pattern) for pattern in rule.expected_directories):
            return []
        expected = ", ".join(rule.expected_directories)
        return [
            Violation(
                file=record,
                rule=rule,
                kind="directory",
                severity=rule.severity,
                reason=f"{record.path} ({rule.role}): {record.directory} は配置先として不正です（期待: {expected}）",
                recommendation=rule.recommendation,
            )
        ]

    @staticmethod
    def _check_filename(record: FileRecord, rule: Rule) -> list[Violation]:
        """ファイル名が命名規約に一致するかチェックする。"""
        if rule.match_filename(record.name) is not None:
            return []
        return [
            Violation(
                file=record,
                rule=rule,
                kind="filename",
                severity=rule.severity,
                reason=f"{record.path} ({rule.role}): ファイル名が命名規約 {rule.filename_pattern} に一致しません",
                recommendation=rule.recommendation,
            )
        ]

    @staticmethod
    def _check_pairing(
        record: FileRecord,
        rule: Rule,
        siblings: dict[tuple[str, str], set[str]],
    ) -> list[Violation]:
        """対になるファイルが同じディレクトリに存在するかチェックする。

        ファイル名が規約に一致せずベース名を決められない場合はチェックしない。
        """
        if rule.pairing is None:
            return []
        base = rule.base_name(record.name)
        if base is None:
            return []
        if base in siblings.get((record.directory, rule.pairing), set()):
            return []
        return [
            Violation(
                file=record,
                rule=rule,
                kind="pairing",
                severity=rule.severity,
                reason=(
                    f"{record.path} ({rule.role}): 同じディレクトリに "
                    f"ベース名 '{base}' の {rule.pairing} が存在しません"
                ),
                recommendation=rule.recommendation,
            )
        ]

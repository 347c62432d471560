"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from convention_checker.config import CheckerConfig
from convention_checker.services.checker import CheckerService
from convention_checker.validators.conventions import ConventionValidator
from convention_checker.validators.rule_table import RuleTable


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def rule_table(config_dir: Path) -> RuleTable:
    """リポジトリ同梱ルールのRuleTable。"""
    return RuleTable(config_dir=config_dir)


@pytest.fixture
def validator(rule_table: RuleTable) -> ConventionValidator:
    """テスト用ConventionValidator。"""
    return ConventionValidator(rule_table)


@pytest.fixture
def checker_service(config_dir: Path) -> CheckerService:
    """テスト用CheckerService。"""
    return CheckerService(config_dir=config_dir)


@pytest.fixture
def checker_config(config_dir: Path) -> CheckerConfig:
    """テスト用CheckerConfig。"""
    return CheckerConfig(config_dir=config_dir)


@pytest.fixture
def write_rules(tmp_path: Path):
    """一時config_dirにルールYAMLを書き込むヘルパー。"""

    def _write(filename: str, content: str) -> Path:
        rules_dir = tmp_path / "convention-rules"
        rules_dir.mkdir(parents=True, exist_ok=True)
        (rules_dir / filename).write_text(content, encoding="utf-8")
        return tmp_path

    return _write

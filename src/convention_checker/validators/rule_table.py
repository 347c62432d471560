"""規約ルールテーブルの読み込み。"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from convention_checker.models.convention import Rule
from convention_checker.models.errors import RuleTableError

logger = logging.getLogger(__name__)


class RuleTable:
    """ロール → 構造規約のマッピング。

    ``config_dir/convention-rules/*.yaml`` をファイル名順に読み込み、
    初回読み込み後はキャッシュした内容を返す。
    """

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir
        self._rules: dict[str, Rule] | None = None

    @property
    def rules_dir(self) -> Path:
        return self._config_dir / "convention-rules"

    def _load_rules(self) -> dict[str, Rule]:
        """規約ルールをYAMLファイルから読み込む。

        Raises:
            RuleTableError: YAMLが不正、ロールが重複、ペアリング先が未定義の場合。
        """
        if self._rules is not None:
            return self._rules

        rules: dict[str, Rule] = {}
        if not self.rules_dir.exists():
            logger.warning("Rules directory not found: %s", self.rules_dir)
            self._rules = rules
            return rules

        for rule_file in sorted(self.rules_dir.glob("*.yaml")):
            try:
                with open(rule_file, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleTableError(str(rule_file), f"YAML parse error: {e}") from None
            except (OSError, UnicodeDecodeError) as e:
                raise RuleTableError(str(rule_file), f"cannot read file: {e}") from None
            if not data:
                continue
            if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
                raise RuleTableError(str(rule_file), "expected a mapping with a 'rules' list")

            for rule_data in data["rules"]:
                try:
                    rule = Rule.model_validate(rule_data)
                except ValidationError as e:
                    raise RuleTableError(str(rule_file), str(e)) from None
                # 1ファイルは高々1ルールに対応する
                if rule.role in rules:
                    raise RuleTableError(str(rule_file), f"duplicate role: {rule.role}")
                rules[rule.role] = rule

        for rule in rules.values():
            if rule.pairing is not None and rule.pairing not in rules:
                raise RuleTableError(
                    str(self.rules_dir),
                    f"role {rule.role} pairs with undefined role: {rule.pairing}",
                )

        logger.info("Loaded %d convention rules from %s", len(rules), self.rules_dir)
        self._rules = rules
        return rules

    def get(self, role: str) -> Rule | None:
        """ロールに対応するルールを返す。未定義ならNone。"""
        return self._load_rules().get(role)

    def roles(self) -> list[str]:
        return list(self._load_rules())

    def all_rules(self) -> list[Rule]:
        return list(self._load_rules().values())

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        """YAML出力・ツール応答用の辞書に変換する。"""
        return {"rules": [rule.model_dump(mode="json", exclude_none=True) for rule in self.all_rules()]}

"""規約ルールのMCPリソース定義。"""

import yaml
from fastmcp import FastMCP

from convention_checker.validators.rule_table import RuleTable


def register_rule_resources(mcp: FastMCP, rule_table: RuleTable) -> None:
    """規約ルール関連のMCPリソースを登録する。"""

    @mcp.resource("convention://rules")
    async def convention_rules() -> str:
        """規約ルール定義を取得する。

        ファイル一覧の検証に使用されるルールをYAML形式で返します。
        """
        return yaml.dump(rule_table.to_dict(), allow_unicode=True, default_flow_style=False, sort_keys=False)

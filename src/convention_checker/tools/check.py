"""規約チェックのMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from convention_checker.models.errors import ConventionCheckerError
from convention_checker.reporting.report import sort_violations
from convention_checker.services.checker import CheckerService


def register_check_tools(mcp: FastMCP, checker_service: CheckerService) -> None:
    """規約チェック関連のMCPツールを登録する。"""

    @mcp.tool()
    async def check_conventions(files: list[dict[str, Any]]) -> dict[str, Any]:
        """ファイル一覧をXcodeプロジェクト構成規約に基づいて検証する。

        各ファイルの配置ディレクトリ、命名規約、対になるファイルの有無を検証し、
        違反のリストを返します。

        Args:
            files: ファイルリスト。各要素は {"path": str, "role": str} 形式。
                roleを省略した場合はパスから推論します。
        """
        try:
            summary = await checker_service.check_files(files)
            return {
                "violations": [v.to_summary() for v in sort_violations(summary.violations)],
                "error_count": summary.error_count,
                "warning_count": summary.warning_count,
            }
        except ConventionCheckerError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def infer_file_role(path: str) -> dict[str, Any]:
        """ファイルパスからロールを推論する。

        推論できない場合は "unknown" を返します。

        Args:
            path: プロジェクトルートからの相対パス（例: "Features/Login/LoginView.swift"）。
        """
        role = await checker_service.infer_file_role(path)
        return {"path": path, "role": role}

    @mcp.tool()
    async def list_convention_rules() -> dict[str, Any]:
        """規約ルール一覧を取得する。

        各ルールにはロール、配置先ディレクトリ、命名パターン、ペアリング先が含まれます。
        """
        try:
            rules = await checker_service.list_rules()
            return {"rules": rules}
        except ConventionCheckerError as e:
            return {"error": type(e).__name__, "message": str(e)}

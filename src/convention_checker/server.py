"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from convention_checker.config import CheckerConfig
from convention_checker.prompts.review import register_review_prompts
from convention_checker.resources.rules import register_rule_resources
from convention_checker.services.checker import CheckerService
from convention_checker.tools.check import register_check_tools


def create_server(config: CheckerConfig | None = None) -> FastMCP:
    """convention-checker MCPサーバーを作成し、ツール・リソース・プロンプトを登録する。

    Args:
        config: 設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = CheckerConfig()

    mcp = FastMCP("convention-checker")

    checker_service = CheckerService(config_dir=config.config_dir)

    register_check_tools(mcp, checker_service)
    register_rule_resources(mcp, checker_service.rule_table)
    register_review_prompts(mcp)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp

"""プロジェクト構成レビューのMCPプロンプト定義。"""

from fastmcp import FastMCP


def register_review_prompts(mcp: FastMCP) -> None:
    """レビュー系のMCPプロンプトを登録する。"""

    @mcp.prompt()
    async def review_project_layout() -> str:
        """Xcodeプロジェクトのファイル構成を規約に沿ってレビューするワークフロー。"""
        return (
            "# Xcodeプロジェクト構成レビュー\n\n"
            "1. `convention://rules` リソースから規約ルールを確認してください。\n"
            "2. プロジェクトのファイル一覧を収集し、各ファイルのロールを決めてください。"
            " 判断に迷う場合は `infer_file_role` ツールを使用してください。\n"
            "3. `check_conventions` ツールでファイル一覧を検証してください。\n"
            "4. 違反ごとに `recommendation` に従って移動・リネームを提案してください。\n"
            "5. 修正後、再度 `check_conventions` を実行して違反が無いことを確認してください。\n\n"
            "## 注意事項\n\n"
            "- `XClient.swift` を作成する場合は、必ず同じディレクトリに `XClient+Live.swift` も作成してください。\n"
            "- `XViewModel.swift` は対応する `XView.swift` と同じ機能ディレクトリに置いてください。\n"
            "- errorは必ず対応してください。warningは推奨事項です。\n"
        )

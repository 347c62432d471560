"""規約違反レポートの整形。"""

import json
from typing import Literal

from convention_checker.models.convention import CheckSummary, Violation

ReportFormat = Literal["text", "json"]

_KIND_ORDER: dict[str, int] = {"unclassifiable": 0, "directory": 1, "filename": 2, "pairing": 3}


def sort_violations(violations: list[Violation]) -> list[Violation]:
    """ファイルパス → ルール → 種別の順に並べる。同順位は入力順を保つ。"""
    return sorted(
        violations,
        key=lambda v: (v.file.path, v.rule.role if v.rule else "", _KIND_ORDER[v.kind]),
    )


def render_report(violations: list[Violation], fmt: ReportFormat = "text") -> str:
    """違反リストをレポート文字列に整形する。

    Args:
        violations: 検出された違反のリスト。
        fmt: ``"text"`` または ``"json"``。

    Returns:
        整形済みレポート。
    """
    summary = CheckSummary(violations=sort_violations(violations))
    if fmt == "json":
        return json.dumps(
            {
                "violations": [v.to_summary() for v in summary.violations],
                "error_count": summary.error_count,
                "warning_count": summary.warning_count,
            },
            ensure_ascii=False,
            indent=2,
        )
    if fmt != "text":
        raise ValueError(f"Unknown report format: {fmt}")

    if not summary.violations:
        return "No convention violations found."

    lines = [f"{v.severity.upper():7} [{v.kind}] {v.reason}" for v in summary.violations]
    lines.append("")
    lines.append(
        f"{len(summary.violations)} violation(s): "
        f"{summary.error_count} error(s), {summary.warning_count} warning(s)"
    )
    return "\n".join(lines)

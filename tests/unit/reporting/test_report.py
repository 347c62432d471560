"""レポート整形のユニットテスト。"""

import json

import pytest

from convention_checker.models.convention import FileRecord
from convention_checker.reporting.report import render_report, sort_violations
from convention_checker.validators.conventions import ConventionValidator


def _records() -> list[FileRecord]:
    return [
        FileRecord(path="Views/HomeView.swift", declared_role="view"),
        FileRecord(path="Clients/API/APIClient.swift", declared_role="client_declaration"),
        FileRecord(path="Helpers/StringHelpers.swift", declared_role="extension"),
        FileRecord(path="Misc/notes.txt", declared_role="notes"),
    ]


class TestRenderReport:
    def test_empty_report(self) -> None:
        assert render_report([]) == "No convention violations found."

    def test_text_report_is_ordered_by_path(self, validator: ConventionValidator) -> None:
        report = render_report(validator.validate(_records()))
        lines = report.splitlines()
        assert lines[0].startswith("ERROR   [pairing] Clients/API/APIClient.swift")
        assert "[directory] Helpers/StringHelpers.swift" in lines[1]
        assert "[filename] Helpers/StringHelpers.swift" in lines[2]
        assert "[unclassifiable] Misc/notes.txt" in lines[3]
        assert "[directory] Views/HomeView.swift" in lines[4]
        assert lines[-1] == "5 violation(s): 5 error(s), 0 warning(s)"

    def test_ordering_independent_of_input_order(self, validator: ConventionValidator) -> None:
        forward = render_report(validator.validate(_records()))
        backward = render_report(validator.validate(list(reversed(_records()))))
        assert forward == backward

    def test_report_is_deterministic(self, validator: ConventionValidator) -> None:
        violations = validator.validate(_records())
        assert render_report(violations) == render_report(violations)

    def test_sort_keeps_kind_order_within_file(self, validator: ConventionValidator) -> None:
        violations = validator.validate([FileRecord(path="Helpers/StringHelpers.swift", declared_role="extension")])
        assert [v.kind for v in sort_violations(list(reversed(violations)))] == ["directory", "filename"]

    def test_json_report(self, validator: ConventionValidator) -> None:
        data = json.loads(render_report(validator.validate(_records()), fmt="json"))
        assert data["error_count"] == 5
        assert data["warning_count"] == 0
        assert [v["path"] for v in data["violations"]][0] == "Clients/API/APIClient.swift"
        assert data["violations"][0]["rule"] == "client_declaration"

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            render_report([], fmt="xml")  # type: ignore[arg-type]

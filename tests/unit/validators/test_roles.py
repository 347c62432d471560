"""ロール推論と引数解釈のユニットテスト。"""

import pytest

from convention_checker.models.errors import InvalidFileArgumentError
from convention_checker.validators.roles import infer_role, parse_file_argument


class TestInferRole:
    @pytest.mark.parametrize(
        ("path", "role"),
        [
            ("MyAppApp.swift", "app"),
            ("Features/Login/LoginView.swift", "view"),
            ("Features/Login/LoginViewModel.swift", "view_model"),
            ("Clients/API/APIClient.swift", "client_declaration"),
            ("Clients/API/APIClient+Live.swift", "client_live"),
            ("Extensions/String+Extensions.swift", "extension"),
            ("Helpers/Date+Formatting.swift", "extension"),
            ("Models/User.swift", "model"),
            ("Resources/Localizable.strings", "resource"),
            ("Assets.xcassets", "resource"),
            ("Supporting Files/Info.plist", "supporting_file"),
            ("MyApp.entitlements", "supporting_file"),
            ("Helpers/Utilities.swift", "unknown"),
        ],
    )
    def test_infer_role(self, path: str, role: str) -> None:
        assert infer_role(path) == role

    def test_app_suffix_outside_root_is_not_app(self) -> None:
        assert infer_role("Common/MyAppApp.swift") == "unknown"


class TestParseFileArgument:
    def test_explicit_role(self) -> None:
        record = parse_file_argument("client_declaration:Clients/API/APIClient.swift")
        assert record.declared_role == "client_declaration"
        assert record.path == "Clients/API/APIClient.swift"

    def test_bare_path_infers_role(self) -> None:
        record = parse_file_argument("Models/User.swift")
        assert record.declared_role == "model"

    def test_unknown_explicit_role_is_kept(self) -> None:
        record = parse_file_argument("controller:Features/Foo/FooController.swift")
        assert record.declared_role == "controller"

    @pytest.mark.parametrize("argument", [":Models/User.swift", "model:", "model:  "])
    def test_invalid_argument(self, argument: str) -> None:
        with pytest.raises(InvalidFileArgumentError):
            parse_file_argument(argument)

    def test_colon_inside_bare_path(self) -> None:
        record = parse_file_argument("Resources/a:b.png")
        assert record.path == "Resources/a:b.png"
        assert record.declared_role == "resource"

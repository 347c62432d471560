"""ファイルパスからのロール推論と ``role:path`` 引数の解釈。"""

import re
from pathlib import PurePosixPath

from convention_checker.models.convention import UNKNOWN_ROLE, FileRecord
from convention_checker.models.errors import InvalidFileArgumentError

# ファイル名サフィックス → ロール（上から順に評価）
_SUFFIX_ROLES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"ViewModel\.swift$"), "view_model"),
    (re.compile(r"View\.swift$"), "view"),
    (re.compile(r"Client\+Live\.swift$"), "client_live"),
    (re.compile(r"Client\.swift$"), "client_declaration"),
    (re.compile(r"\+[A-Za-z0-9]+\.swift$"), "extension"),
]

# トップレベルディレクトリ → ロール
_DIRECTORY_ROLES: dict[str, str] = {
    "Models": "model",
    "Extensions": "extension",
    "Resources": "resource",
    "Supporting Files": "supporting_file",
}

_RESOURCE_SUFFIXES: set[str] = {
    ".xcassets",
    ".xcstrings",
    ".strings",
    ".stringsdict",
    ".json",
    ".ttf",
    ".otf",
    ".png",
    ".jpg",
    ".pdf",
    ".storyboard",
    ".xib",
    ".mp3",
    ".wav",
}

_SUPPORTING_SUFFIXES: set[str] = {".plist", ".entitlements", ".xcconfig"}

_ROLE_TOKEN = re.compile(r"[a-z_]*")


def infer_role(path: str) -> str:
    """ファイルパスからロールを推論する。

    命名サフィックス、トップレベルディレクトリ、拡張子の順に判定し、
    いずれにも当てはまらない場合は ``unknown`` を返す。
    """
    pure = PurePosixPath(path.replace("\\", "/"))
    name = pure.name
    parts = pure.parts[:-1]

    if not parts and name.endswith("App.swift"):
        return "app"

    for pattern, role in _SUFFIX_ROLES:
        if pattern.search(name):
            return role

    if parts and parts[0] in _DIRECTORY_ROLES:
        return _DIRECTORY_ROLES[parts[0]]

    suffix = pure.suffix.lower()
    if suffix in _RESOURCE_SUFFIXES:
        return "resource"
    if suffix in _SUPPORTING_SUFFIXES:
        return "supporting_file"
    return UNKNOWN_ROLE


def parse_file_argument(argument: str) -> FileRecord:
    """``role:path`` またはロール省略のパスをFileRecordに変換する。

    Raises:
        InvalidFileArgumentError: ロールまたはパスが空の場合。
    """
    role, sep, path = argument.partition(":")
    # コロンの前がロール名として妥当な場合のみ ``role:path`` とみなす
    if not sep or not _ROLE_TOKEN.fullmatch(role.strip()):
        path, role = argument, infer_role(argument)
    role, path = role.strip(), path.strip()
    if not role or not path:
        raise InvalidFileArgumentError(argument)
    try:
        return FileRecord(path=path, declared_role=role)
    except ValueError:
        raise InvalidFileArgumentError(argument) from None

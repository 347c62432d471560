"""convention-checkerのカスタム例外クラス。"""


class ConventionCheckerError(Exception):
    """convention-checkerの基底例外クラス。"""


class RuleTableError(ConventionCheckerError):
    """規約ルール定義の読み込み・検証エラー。"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid rule table ({path}): {reason}")
        self.path = path
        self.reason = reason


class InvalidFileArgumentError(ConventionCheckerError):
    """``role:path`` 形式のファイル指定を解釈できない場合の例外。"""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Invalid file argument: {argument!r}. Expected 'role:path' or a bare path.")
        self.argument = argument


class ManifestError(ConventionCheckerError):
    """ファイル一覧マニフェストの読み込みエラー。"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid manifest ({path}): {reason}")
        self.path = path
        self.reason = reason

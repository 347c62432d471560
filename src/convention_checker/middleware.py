"""URLトークン認証ミドルウェア。"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from convention_checker.config import CheckerConfig

# トークン検証を行わないパス
PUBLIC_PATHS: frozenset[str] = frozenset({"/health"})


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """``CheckerConfig.url_token`` が設定されている場合に ``?token=`` を要求する。"""

    def __init__(self, app: ASGIApp, config: CheckerConfig) -> None:
        super().__init__(app)
        self._url_token = config.url_token

    def _is_authorized(self, request: Request) -> bool:
        if not self._url_token or request.url.path in PUBLIC_PATHS:
            return True
        return request.query_params.get("token", "") == self._url_token

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self._is_authorized(request):
            return await call_next(request)
        return JSONResponse(
            {"error": "Unauthorized", "message": "Invalid or missing token for convention-checker"},
            status_code=401,
        )

"""TokenAuthMiddlewareのユニットテスト。"""

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from convention_checker.config import CheckerConfig
from convention_checker.middleware import TokenAuthMiddleware


async def _ok(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def _make_client(url_token: str) -> TestClient:
    app = Starlette(
        routes=[Route("/health", _ok), Route("/mcp", _ok)],
        middleware=[Middleware(TokenAuthMiddleware, config=CheckerConfig(url_token=url_token))],
    )
    return TestClient(app)


class TestTokenAuthMiddleware:
    def test_no_token_configured(self) -> None:
        client = _make_client("")
        assert client.get("/mcp").status_code == 200

    def test_missing_token_rejected(self) -> None:
        client = _make_client("secret")
        response = client.get("/mcp")
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_valid_token(self) -> None:
        client = _make_client("secret")
        assert client.get("/mcp?token=secret").status_code == 200

    def test_health_skips_token(self) -> None:
        client = _make_client("secret")
        assert client.get("/health").status_code == 200

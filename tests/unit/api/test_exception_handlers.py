"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.exception_handlers import setup_exception_handlers
from core.exceptions import StorageUnavailableError, TodoNotFoundError


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _get(app: FastAPI, path: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_not_found_returns_error_message(self) -> None:
        app = _create_test_app()

        @app.get("/raise-not-found")
        async def _() -> None:
            raise TodoNotFoundError(42)

        response = await _get(app, "/raise-not-found")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Todo not found"
        assert body["error_code"] == "TODO_NOT_FOUND"
        assert body["details"] == {"todo_id": 42}

    @pytest.mark.asyncio
    async def test_storage_error_is_server_error(self) -> None:
        app = _create_test_app()

        @app.get("/raise-storage")
        async def _() -> None:
            raise StorageUnavailableError("/tmp/todos.json", "file does not exist")

        response = await _get(app, "/raise-storage")

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "STORAGE_UNAVAILABLE"
        assert "file does not exist" in body["error"]
        assert body["details"] == {"reason": "file does not exist"}
        assert "/tmp/todos.json" not in response.text

    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        from starlette.exceptions import HTTPException

        app = _create_test_app()

        @app.get("/raise-http")
        async def _() -> None:
            raise HTTPException(status_code=405, detail="Method Not Allowed")

        response = await _get(app, "/raise-http")

        assert response.status_code == 405
        body = response.json()
        assert body["error_code"] == "HTTP_ERROR"
        assert body["error"] == "Method Not Allowed"

    @pytest.mark.asyncio
    async def test_validation_error_returns_field_details(self) -> None:
        from pydantic import BaseModel, Field

        app = _create_test_app()

        class Body(BaseModel):
            task: str = Field(..., min_length=1)

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={"task": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["error"] == "Request validation failed"
        assert body["details"][0]["field"] == "body.task"

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_500(self) -> None:
        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        handler = app.exception_handlers.get(Exception)
        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, RuntimeError("Something went wrong"))  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["details"]["request_id"] == "test-req-id"

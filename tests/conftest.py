"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

# Disable rate limiting and startup file creation in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TODOS_CREATE_IF_MISSING"] = "false"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.todo_service import TodoService
from infrastructure.storage.json_todo_repo import JsonFileTodoRepository


@pytest.fixture
def todos_file(tmp_path: Path) -> Path:
    """An initialized, empty todo file."""
    path = tmp_path / "todos.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def file_repository(todos_file: Path) -> JsonFileTodoRepository:
    return JsonFileTodoRepository(todos_file)


@pytest.fixture
def file_service(file_repository: JsonFileTodoRepository) -> TodoService:
    """Todo service over a real JSON file in tmp_path."""
    return TodoService(file_repository)


@pytest.fixture
def app(file_service: TodoService) -> Generator[FastAPI, None, None]:
    """Application wired to the tmp_path todo file."""
    from api.dependencies import get_todo_service
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_todo_service] = lambda: file_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async test client against the tmp_path-backed app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

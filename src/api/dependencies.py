"""Dependency injection factories for the API."""

from functools import lru_cache

from core.config import settings
from domain.services.todo_service import TodoService
from infrastructure.storage.json_todo_repo import JsonFileTodoRepository


def get_todo_repository() -> JsonFileTodoRepository:
    """Repository over the configured todo file."""
    return JsonFileTodoRepository(settings.todos_file)


@lru_cache
def get_todo_service() -> TodoService:
    """Get the process-wide Todo service.

    Cached so every request shares one instance, and therefore one lock,
    over the todo file.
    """
    return TodoService(get_todo_repository())

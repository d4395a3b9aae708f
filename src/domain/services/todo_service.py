"""Todo service layer: the store operations over the todo collection."""

import asyncio
import time
from collections.abc import Callable

import structlog

from core.exceptions import InvalidInputError, TodoNotFoundError
from domain.entities.todo import Todo
from domain.repositories.todo_repository import ITodoRepository

logger = structlog.get_logger()


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class TodoService:
    """Service layer owning read-modify-write access to the todo collection.

    Every operation loads the whole collection, transforms it in memory and,
    when mutating, writes the whole collection back. All four operations run
    under one lock so concurrent requests handled by this instance cannot
    interleave their read and write halves.
    """

    def __init__(
        self,
        repository: ITodoRepository,
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._repo = repository
        self._clock = clock
        self._lock = asyncio.Lock()
        self._last_id = 0

    async def initialize(self) -> bool:
        """Create an empty collection if none exists yet.

        Returns True when a new collection was written.
        """
        async with self._lock:
            if await self._repo.exists():
                return False
            await self._repo.save_all([])
            logger.info("todo_store_initialized")
            return True

    async def list_todos(self) -> list[Todo]:
        """Return the full collection in persisted order."""
        async with self._lock:
            return await self._repo.load_all()

    async def add(self, task: str | None) -> Todo:
        """Append a new, not-done todo and persist the collection."""
        if task is None or not task.strip():
            raise InvalidInputError("Task must be a non-empty string", field="task")

        async with self._lock:
            todos = await self._repo.load_all()
            todo = Todo(id=self._next_id(todos), task=task.strip())
            todos.append(todo)
            await self._repo.save_all(todos)

        logger.info("todo_added", todo_id=todo.id)
        return todo

    async def complete(self, todo_id: int) -> Todo:
        """Mark the first todo with ``todo_id`` as done.

        Completing an already-done todo is a no-op that still succeeds.
        """
        async with self._lock:
            todos = await self._repo.load_all()
            todo = next((t for t in todos if t.id == todo_id), None)
            if todo is None:
                raise TodoNotFoundError(todo_id)

            if not todo.done:
                todo.complete()
                await self._repo.save_all(todos)
                logger.info("todo_completed", todo_id=todo_id)

        return todo

    async def delete(self, todo_id: int) -> str:
        """Remove every todo with ``todo_id`` and persist the reduced collection."""
        async with self._lock:
            todos = await self._repo.load_all()
            remaining = [t for t in todos if t.id != todo_id]
            if len(remaining) == len(todos):
                raise TodoNotFoundError(todo_id)

            await self._repo.save_all(remaining)

        logger.info("todo_deleted", todo_id=todo_id, removed=len(todos) - len(remaining))
        return f"Deleted todo with id {todo_id}"

    def _next_id(self, todos: list[Todo]) -> int:
        """Allocate a time-derived id that is strictly greater than any seen.

        The clock gives millisecond resolution; two adds in the same
        millisecond (or a clock step backwards) still get distinct,
        increasing ids. Must be called with the lock held.
        """
        highest = max((t.id for t in todos), default=0)
        new_id = max(self._clock(), self._last_id + 1, highest + 1)
        self._last_id = new_id
        return new_id

"""Shared fixtures for unit tests."""

import asyncio
from dataclasses import replace

import pytest

from domain.entities.todo import Todo
from domain.services.todo_service import TodoService


class FakeTodoRepository:
    """In-memory ITodoRepository for unit testing.

    ``load_all`` yields to the event loop before returning so concurrent
    callers genuinely interleave, and always hands out copies so nothing is
    "persisted" until ``save_all``.
    """

    def __init__(self, todos: list[Todo] | None = None, initialized: bool = True) -> None:
        self._todos = [replace(t) for t in todos or []]
        self.initialized = initialized
        self.save_count = 0

    @property
    def stored(self) -> list[Todo]:
        return [replace(t) for t in self._todos]

    async def load_all(self) -> list[Todo]:
        snapshot = [replace(t) for t in self._todos]
        await asyncio.sleep(0)
        return snapshot

    async def save_all(self, todos: list[Todo]) -> None:
        await asyncio.sleep(0)
        self._todos = [replace(t) for t in todos]
        self.initialized = True
        self.save_count += 1

    async def exists(self) -> bool:
        return self.initialized


class FixedClock:
    """Clock returning a settable millisecond value."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def repo() -> FakeTodoRepository:
    """Create a fresh, empty FakeTodoRepository."""
    return FakeTodoRepository()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def service(repo: FakeTodoRepository, clock: FixedClock) -> TodoService:
    """Create service over the fake repository with a fixed clock."""
    return TodoService(repo, clock=clock)


@pytest.fixture
def make_service(clock: FixedClock):
    """Build a service over a fake repository seeded with ``todos``."""

    def _make(todos: list[Todo], initialized: bool = True) -> tuple[TodoService, FakeTodoRepository]:
        fake = FakeTodoRepository(todos, initialized=initialized)
        return TodoService(fake, clock=clock), fake

    return _make

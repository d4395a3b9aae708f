"""Todo repository protocol."""

from typing import Protocol

from domain.entities.todo import Todo


class ITodoRepository(Protocol):
    """Repository interface over the whole todo collection.

    The collection is always loaded and saved as one unit; there is no
    per-record access.
    """

    async def load_all(self) -> list[Todo]:
        """Read the full collection in persisted order."""
        ...

    async def save_all(self, todos: list[Todo]) -> None:
        """Overwrite the persisted collection with ``todos``."""
        ...

    async def exists(self) -> bool:
        """Whether the backing collection has been initialized."""
        ...

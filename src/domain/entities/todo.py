"""Todo domain entity."""

from dataclasses import dataclass


@dataclass
class Todo:
    """Domain entity for a single task record."""

    id: int
    task: str
    done: bool = False

    def complete(self) -> None:
        """Mark the todo as done. Completion is one-way."""
        self.done = True

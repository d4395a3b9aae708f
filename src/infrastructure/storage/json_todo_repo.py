"""JSON file implementation of the Todo repository."""

import asyncio
import os
import tempfile
from pathlib import Path

import orjson
import structlog
from pydantic import ValidationError

from core.exceptions import StorageUnavailableError
from domain.entities.todo import Todo
from infrastructure.storage.models import TodoCollection, TodoRecord

logger = structlog.get_logger()


class JsonFileTodoRepository:
    """ITodoRepository backed by a single pretty-printed JSON array."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def load_all(self) -> list[Todo]:
        """Read and parse the whole file."""
        return await asyncio.to_thread(self._read)

    async def save_all(self, todos: list[Todo]) -> None:
        """Replace the whole file with ``todos``."""
        await asyncio.to_thread(self._write, todos)

    async def exists(self) -> bool:
        return await asyncio.to_thread(self._path.is_file)

    def _read(self) -> list[Todo]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            raise self._unavailable("file does not exist")
        except OSError as e:
            raise self._unavailable(e.strerror or str(e))

        try:
            records = TodoCollection.validate_python(orjson.loads(raw))
        except orjson.JSONDecodeError:
            raise self._unavailable("file is not valid JSON")
        except ValidationError as e:
            raise self._unavailable(f"malformed todo collection ({e.error_count()} errors)")

        return [self._to_entity(record) for record in records]

    def _write(self, todos: list[Todo]) -> None:
        data = orjson.dumps(
            [self._to_record(todo).model_dump() for todo in todos],
            option=orjson.OPT_INDENT_2,
        )

        # Write beside the target and rename over it so readers never see a
        # partially written file.
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise self._unavailable(e.strerror or str(e))

    def _unavailable(self, reason: str) -> StorageUnavailableError:
        logger.error("todo_storage_unavailable", path=str(self._path), reason=reason)
        return StorageUnavailableError(str(self._path), reason)

    def _to_entity(self, record: TodoRecord) -> Todo:
        """Convert persisted record to domain entity."""
        return Todo(id=record.id, task=record.task, done=record.done)

    def _to_record(self, entity: Todo) -> TodoRecord:
        """Convert domain entity to persisted record."""
        return TodoRecord(id=entity.id, task=entity.task, done=entity.done)

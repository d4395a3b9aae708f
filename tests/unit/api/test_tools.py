"""Unit tests for the tool registry."""

import pytest

from api.tools import TOOLS, get_tool
from core.exceptions import InvalidInputError, TodoNotFoundError, ToolNotFoundError
from domain.entities.todo import Todo
from domain.services.todo_service import TodoService


class TestToolRegistry:
    def test_declares_the_four_operations(self) -> None:
        assert [(t.name, t.route) for t in TOOLS] == [
            ("getTodos", "/todos/get"),
            ("addTodo", "/todos/add"),
            ("markTodoDone", "/todos/done"),
            ("deleteTodo", "/todos/delete"),
        ]

    def test_unknown_tool_raises(self) -> None:
        with pytest.raises(ToolNotFoundError) as exc_info:
            get_tool("dropTable")

        assert exc_info.value.status_code == 404

    def test_add_todo_input_schema_requires_task(self) -> None:
        schema = get_tool("addTodo").manifest_entry().input_schema

        assert schema["type"] == "object"
        assert schema["properties"]["task"]["type"] == "string"
        assert schema["required"] == ["task"]

    def test_id_tools_require_integer_id(self) -> None:
        for name in ("markTodoDone", "deleteTodo"):
            schema = get_tool(name).manifest_entry().input_schema
            assert schema["properties"]["id"]["type"] == "integer"
            assert schema["required"] == ["id"]

    def test_output_schemas(self) -> None:
        get_schema = get_tool("getTodos").manifest_entry().output_schema
        delete_schema = get_tool("deleteTodo").manifest_entry().output_schema

        assert get_schema["type"] == "array"
        assert delete_schema == {"type": "string"}


class TestToolInvoke:
    @pytest.mark.asyncio
    async def test_add_then_get(self, service: TodoService) -> None:
        added = await get_tool("addTodo").invoke(service, {"task": "buy milk"})
        listed = await get_tool("getTodos").invoke(service, {})

        assert added["task"] == "buy milk"
        assert added["done"] is False
        assert listed == [added]

    @pytest.mark.asyncio
    async def test_mark_done_and_delete(self, make_service) -> None:
        service, repo = make_service([Todo(id=10, task="a")])

        done = await get_tool("markTodoDone").invoke(service, {"id": 10})
        message = await get_tool("deleteTodo").invoke(service, {"id": 10})

        assert done == {"id": 10, "task": "a", "done": True}
        assert message == "Deleted todo with id 10"
        assert repo.stored == []

    @pytest.mark.asyncio
    async def test_invalid_input_raises(self, service: TodoService) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            await get_tool("addTodo").invoke(service, {})

        assert exc_info.value.details == {"field": "task"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", ["10", True])
    async def test_id_must_be_a_real_integer(self, make_service, bad_id) -> None:
        service, repo = make_service([Todo(id=10, task="a"), Todo(id=1, task="b")])

        with pytest.raises(InvalidInputError) as exc_info:
            await get_tool("markTodoDone").invoke(service, {"id": bad_id})

        assert exc_info.value.details == {"field": "id"}
        assert repo.save_count == 0

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, service: TodoService) -> None:
        with pytest.raises(TodoNotFoundError):
            await get_tool("deleteTodo").invoke(service, {"id": 1})

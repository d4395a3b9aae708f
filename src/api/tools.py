"""Tool registration for agent-facing discovery.

Each store operation is declared once here with its name, description,
input/output models and HTTP route. The HTTP manifest, the invoke-by-name
endpoint and the MCP server are all built from this registry.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from api.schemas.todo import AddTodoInput, EmptyInput, TodoIdInput, TodoResponse
from api.schemas.tool import ToolManifestEntry
from core.exceptions import InvalidInputError, ToolNotFoundError
from domain.services.todo_service import TodoService

ToolHandler = Callable[[TodoService, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A store operation exposed as a named tool."""

    name: str
    description: str
    route: str
    input_model: type[BaseModel]
    output_type: Any
    handler: ToolHandler

    def manifest_entry(self) -> ToolManifestEntry:
        return ToolManifestEntry(
            name=self.name,
            description=self.description,
            input_schema=self.input_model.model_json_schema(),
            output_schema=TypeAdapter(self.output_type).json_schema(),
            route=self.route,
        )

    def parse_input(self, payload: dict[str, Any]) -> BaseModel:
        try:
            return self.input_model.model_validate(payload)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(x) for x in first["loc"]) or None
            raise InvalidInputError(f"Invalid input for {self.name}: {first['msg']}", field=field)

    async def invoke(self, service: TodoService, payload: dict[str, Any]) -> Any:
        """Validate ``payload``, run the operation and return JSON-ready output."""
        result = await self.handler(service, self.parse_input(payload))
        return TypeAdapter(self.output_type).dump_python(result, mode="json")


async def _get_todos(service: TodoService, _: EmptyInput) -> list[TodoResponse]:
    todos = await service.list_todos()
    return [TodoResponse.model_validate(t) for t in todos]


async def _add_todo(service: TodoService, args: AddTodoInput) -> TodoResponse:
    return TodoResponse.model_validate(await service.add(args.task))


async def _mark_todo_done(service: TodoService, args: TodoIdInput) -> TodoResponse:
    return TodoResponse.model_validate(await service.complete(args.id))


async def _delete_todo(service: TodoService, args: TodoIdInput) -> str:
    return await service.delete(args.id)


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="getTodos",
        description="Get the list of all todos",
        route="/todos/get",
        input_model=EmptyInput,
        output_type=list[TodoResponse],
        handler=_get_todos,
    ),
    ToolDefinition(
        name="addTodo",
        description="Add a new todo task",
        route="/todos/add",
        input_model=AddTodoInput,
        output_type=TodoResponse,
        handler=_add_todo,
    ),
    ToolDefinition(
        name="markTodoDone",
        description="Mark a todo task as completed",
        route="/todos/done",
        input_model=TodoIdInput,
        output_type=TodoResponse,
        handler=_mark_todo_done,
    ),
    ToolDefinition(
        name="deleteTodo",
        description="Delete a todo task by ID",
        route="/todos/delete",
        input_model=TodoIdInput,
        output_type=str,
        handler=_delete_todo,
    ),
)

_TOOLS_BY_NAME = {tool.name: tool for tool in TOOLS}


def get_tool(name: str) -> ToolDefinition:
    """Look up a registered tool by name."""
    try:
        return _TOOLS_BY_NAME[name]
    except KeyError:
        raise ToolNotFoundError(name) from None

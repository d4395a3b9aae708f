"""Todo API routes.

One POST route per store operation, matching the tool registry.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_todo_service
from api.schemas.common import ErrorResponse
from api.schemas.todo import (
    AddTodoRequest,
    MessageOutput,
    TodoIdRequest,
    TodoListOutput,
    TodoOutput,
    TodoResponse,
)
from core.config import settings
from core.rate_limit import limiter
from domain.entities.todo import Todo
from domain.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])

_STORAGE_ERROR = {500: {"model": ErrorResponse, "description": "Todo storage unavailable"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Todo not found"}}
_INVALID = {422: {"model": ErrorResponse, "description": "Invalid input"}}


@router.post(
    "/get",
    response_model=TodoListOutput,
    summary="List all todos",
    responses={**_STORAGE_ERROR},
)
@limiter.limit(settings.rate_limit_read)  # type: ignore[untyped-decorator]
async def get_todos(
    request: Request,
    service: TodoService = Depends(get_todo_service),
) -> TodoListOutput:
    """Return the whole todo collection in insertion order. Takes no input."""
    todos = await service.list_todos()
    return TodoListOutput(output=[_build_todo_response(t) for t in todos])


@router.post(
    "/add",
    response_model=TodoOutput,
    summary="Add a todo",
    responses={**_INVALID, **_STORAGE_ERROR},
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def add_todo(
    request: Request,
    body: AddTodoRequest,
    service: TodoService = Depends(get_todo_service),
) -> TodoOutput:
    """Append a new todo with `done: false` and return it."""
    todo = await service.add(body.input.task)
    return TodoOutput(output=_build_todo_response(todo))


@router.post(
    "/done",
    response_model=TodoOutput,
    summary="Mark a todo as done",
    responses={**_NOT_FOUND, **_INVALID, **_STORAGE_ERROR},
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def mark_todo_done(
    request: Request,
    body: TodoIdRequest,
    service: TodoService = Depends(get_todo_service),
) -> TodoOutput:
    """
    Set `done: true` on the todo with the given id.

    Marking an already-done todo again succeeds and returns it unchanged.
    """
    todo = await service.complete(body.input.id)
    return TodoOutput(output=_build_todo_response(todo))


@router.post(
    "/delete",
    response_model=MessageOutput,
    summary="Delete a todo",
    responses={**_NOT_FOUND, **_INVALID, **_STORAGE_ERROR},
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def delete_todo(
    request: Request,
    body: TodoIdRequest,
    service: TodoService = Depends(get_todo_service),
) -> MessageOutput:
    """Remove the todo with the given id and return a confirmation message."""
    message = await service.delete(body.input.id)
    return MessageOutput(output=message)


def _build_todo_response(todo: Todo) -> TodoResponse:
    """Convert domain entity to response schema."""
    return TodoResponse(id=todo.id, task=todo.task, done=todo.done)

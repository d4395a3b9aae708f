"""Pydantic schemas for the Todo routes.

Every route takes an ``{"input": {...}}`` envelope and answers with an
``{"output": ...}`` envelope.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class TodoResponse(BaseModel):
    """Schema for a single Todo."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {"id": 1760000000000, "task": "buy milk", "done": False},
        },
    )

    id: int
    task: str
    done: bool


class EmptyInput(BaseModel):
    """Input for operations that take no arguments."""


class AddTodoInput(BaseModel):
    """Arguments for adding a todo."""

    task: str = Field(..., min_length=1, description="What needs to be done")


class TodoIdInput(BaseModel):
    """Arguments naming an existing todo."""

    # Strict: "1" or true must not be coerced into an id.
    id: StrictInt = Field(..., description="Identifier of the todo")


class AddTodoRequest(BaseModel):
    input: AddTodoInput


class TodoIdRequest(BaseModel):
    input: TodoIdInput


class TodoListOutput(BaseModel):
    """Schema for list of Todos response."""

    output: list[TodoResponse]


class TodoOutput(BaseModel):
    """Schema for single Todo response."""

    output: TodoResponse


class MessageOutput(BaseModel):
    """Schema for a confirmation message response."""

    output: str

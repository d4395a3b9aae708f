"""Tool discovery and invoke-by-name routes."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_todo_service
from api.schemas.common import ErrorResponse
from api.schemas.tool import ToolCallRequest, ToolManifest
from api.tools import TOOLS, get_tool
from core.config import settings
from core.rate_limit import limiter
from domain.services.todo_service import TodoService

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get(
    "",
    response_model=ToolManifest,
    response_model_by_alias=True,
    summary="List registered tools",
)
async def list_tools() -> ToolManifest:
    """Describe every tool with its input and output JSON schemas and route."""
    return ToolManifest(tools=[tool.manifest_entry() for tool in TOOLS])


@router.post(
    "/{name}",
    summary="Invoke a tool by name",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown tool or todo"},
        422: {"model": ErrorResponse, "description": "Invalid tool input"},
    },
)
@limiter.limit(settings.rate_limit_write)  # type: ignore[untyped-decorator]
async def call_tool(
    request: Request,
    name: str,
    body: ToolCallRequest,
    service: TodoService = Depends(get_todo_service),
) -> dict[str, Any]:
    """Run the named tool with `input` and wrap its result as `{"output": ...}`."""
    tool = get_tool(name)
    return {"output": await tool.invoke(service, body.input)}

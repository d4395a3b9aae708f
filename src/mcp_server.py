"""MCP server exposing the todo tools over stdio.

Tool names and descriptions come from the same registry as the HTTP
manifest, and each tool calls the store directly rather than going through
the HTTP routes.
"""

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from mcp.server.fastmcp import FastMCP

from api.dependencies import get_todo_service
from api.tools import get_tool
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Create the todo file on startup when configured to."""
    if settings.todos_create_if_missing:
        await get_todo_service().initialize()
    logger.info("mcp_server_started", todos_file=str(settings.todos_file))
    yield


mcp = FastMCP(settings.app_name, lifespan=lifespan)


async def _invoke(name: str, payload: dict[str, Any]) -> Any:
    return await get_tool(name).invoke(get_todo_service(), payload)


@mcp.tool(name="getTodos", description=get_tool("getTodos").description)
async def get_todos() -> list[dict[str, Any]]:
    return await _invoke("getTodos", {})


@mcp.tool(name="addTodo", description=get_tool("addTodo").description)
async def add_todo(task: str) -> dict[str, Any]:
    return await _invoke("addTodo", {"task": task})


@mcp.tool(name="markTodoDone", description=get_tool("markTodoDone").description)
async def mark_todo_done(id: int) -> dict[str, Any]:
    return await _invoke("markTodoDone", {"id": id})


@mcp.tool(name="deleteTodo", description=get_tool("deleteTodo").description)
async def delete_todo(id: int) -> str:
    return await _invoke("deleteTodo", {"id": id})


def run() -> None:
    """Console entry point."""
    setup_logging(stream=sys.stderr)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run()

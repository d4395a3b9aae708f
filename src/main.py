"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.dependencies import get_todo_service
from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes import router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the todo file on startup when configured to."""
    if settings.todos_create_if_missing:
        await get_todo_service().initialize()
    logger.info(
        "server_started",
        todos_file=str(settings.todos_file),
        port=settings.port,
    )
    yield
    logger.info("server_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Todo Tool Server\n\n"
            "A small task list stored in one JSON file, exposed as four "
            "tools an agent can discover and call.\n\n"
            "### Tools\n"
            "- `getTodos` → `POST /todos/get`\n"
            "- `addTodo` → `POST /todos/add`\n"
            "- `markTodoDone` → `POST /todos/done`\n"
            "- `deleteTodo` → `POST /todos/delete`\n\n"
            "Requests use an `{\"input\": {...}}` body and responses an "
            "`{\"output\": ...}` body. `GET /tools` returns the manifest "
            "with JSON schemas; `POST /tools/{name}` invokes a tool by name."
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "todos",
                "description": "Todo operations",
            },
            {
                "name": "tools",
                "description": "Tool manifest and invoke-by-name",
            },
        ],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    app.include_router(router)

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production and settings.debug,
    )


if __name__ == "__main__":
    run()

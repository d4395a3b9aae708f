"""API router configuration."""

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.todos import router as todos_router
from api.routes.tools import router as tools_router

router = APIRouter()
router.include_router(health_router)
router.include_router(todos_router)
router.include_router(tools_router)

"""API router aggregation."""

from fastapi import APIRouter

from src.api.action_items import router as action_items_router
from src.api.export import router as export_router
from src.api.health import router as health_router
from src.api.meetings import router as meetings_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(meetings_router)
# Review edits live under /meetings/{meeting_id}/action-items
api_router.include_router(action_items_router)
api_router.include_router(export_router)

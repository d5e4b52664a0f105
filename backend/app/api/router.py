"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from app.api.routes import rings

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(rings.router)

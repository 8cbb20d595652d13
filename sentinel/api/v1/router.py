"""
API v1 router.
"""
from fastapi import APIRouter

from sentinel.api.v1.endpoints import health, parse, snapshots

api_router = APIRouter()

# Health check endpoint (no prefix, so it's /api/v1/health)
api_router.include_router(health.router, tags=["health"])

api_router.include_router(parse.router, prefix="/parse", tags=["parse"])
api_router.include_router(snapshots.router, prefix="/snapshots", tags=["snapshots"])

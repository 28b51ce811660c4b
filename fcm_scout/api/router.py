"""
Aggregated API router.
"""

from fastapi import APIRouter

from fcm_scout.api.endpoints import codes, players

api_router = APIRouter()

# Register endpoint routers here to keep create_fastapi_app clean
api_router.include_router(players.router, tags=["players"])
api_router.include_router(codes.router, tags=["codes"])

"""
API Module
FastAPI Anwendung, Endpoints und Models
"""

from .main import create_fastapi_app
from .models import ErrorResponse, PlayerDetailResponse, PlayerListResponse

__all__ = [
    "create_fastapi_app",
    "ErrorResponse",
    "PlayerListResponse",
    "PlayerDetailResponse",
]

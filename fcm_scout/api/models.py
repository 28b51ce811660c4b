"""
API Models
Pydantic Models für die JSON-Envelopes der API
"""

from typing import Literal, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fcm_scout.domain.models import CodeRecord, PlayerRecord


class PlayerListResponse(BaseModel):
    """Envelope für Spielerlisten"""

    status: Literal["success"] = "success"
    count: int
    data: list[PlayerRecord]

    @classmethod
    def of(cls, players: list[PlayerRecord]) -> "PlayerListResponse":
        return cls(count=len(players), data=players)


class PlayerDetailResponse(BaseModel):
    """Envelope für einen einzelnen Spieler"""

    status: Literal["success"] = "success"
    data: PlayerRecord


class CodeListResponse(BaseModel):
    """Envelope für Redeem-Codes"""

    status: Literal["success"] = "success"
    count: int
    data: list[CodeRecord]

    @classmethod
    def of(cls, codes: list[CodeRecord]) -> "CodeListResponse":
        return cls(count=len(codes), data=codes)


class ErrorResponse(BaseModel):
    """Einheitlicher Fehler-Envelope"""

    status: Literal["error"] = "error"
    message: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"


def error_response(message: str, details: Optional[str] = None, *, status_code: int = 500) -> JSONResponse:
    body = ErrorResponse(message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())

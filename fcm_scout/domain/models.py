"""
Domain models for scraped player and redeem-code records using Pydantic.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

STAT_NAMES: tuple[str, ...] = ("pace", "shooting", "passing", "dribbling", "defending", "physical")

ATTRIBUTE_NAMES: tuple[str, ...] = (
    "height",
    "weight",
    "foot",
    "age",
    "work_rates",
    "weak_foot",
    "skill_moves",
)


def empty_attributes() -> dict[str, Optional[str]]:
    return {name: None for name in ATTRIBUTE_NAMES}


class PlayerRecord(BaseModel):
    """One player as scraped from a list or detail page.

    Core string fields default to "" when extraction found nothing; ``stats``
    only holds stats that were found; ``attributes`` always carries every
    secondary attribute name, with ``None`` for the undiscovered ones.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = ""
    rating: str = ""
    position: str = ""
    alt_position: str = ""
    club: str = ""
    nation: str = ""
    card_url: str = ""
    stats: dict[str, int] = Field(default_factory=dict)
    attributes: dict[str, Optional[str]] = Field(default_factory=empty_attributes)

    @field_validator("id", "rating", mode="before")
    @classmethod
    def _coerce_text(cls, v):
        # local fixtures may carry numeric ids/ratings
        if v is None:
            return ""
        return str(v) if isinstance(v, (int, float)) else v

    @field_validator("name", "position", "alt_position", "club", "nation", "card_url", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("stats")
    @classmethod
    def _known_stats_only(cls, v: dict[str, int]) -> dict[str, int]:
        return {k: val for k, val in v.items() if k in STAT_NAMES}

    @field_validator("attributes", mode="before")
    @classmethod
    def _complete_attributes(cls, v):
        merged = empty_attributes()
        for k, val in (v or {}).items():
            if k in merged:
                merged[k] = val or None
        return merged


class CodeStatus(str, Enum):
    UNKNOWN = "unknown"
    ACTIVE = "active"
    EXPIRED = "expired"


class CodeRecord(BaseModel):
    code: str
    source: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: CodeStatus = CodeStatus.UNKNOWN
    description: Optional[str] = None
    rewards: list[str] = Field(default_factory=list)


class SearchCriteria(BaseModel):
    """Optional constraint set for player search; blank strings count as absent."""

    name: Optional[str] = None
    position: Optional[str] = None
    min_rating: Optional[int] = None
    max_rating: Optional[int] = None
    club: Optional[str] = None
    nation: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_rating_bound(self) -> bool:
        return self.min_rating is not None or self.max_rating is not None

    def is_empty(self) -> bool:
        return all(getattr(self, f) is None for f in type(self).model_fields)

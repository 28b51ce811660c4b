"""
Domain Module
Records, constraint sets and pure filtering over scraped data
"""

from .filters import filter_players, matches
from .models import (
    ATTRIBUTE_NAMES,
    STAT_NAMES,
    CodeRecord,
    CodeStatus,
    PlayerRecord,
    SearchCriteria,
)

__all__ = [
    "PlayerRecord",
    "CodeRecord",
    "CodeStatus",
    "SearchCriteria",
    "STAT_NAMES",
    "ATTRIBUTE_NAMES",
    "filter_players",
    "matches",
]

from __future__ import annotations

from collections.abc import Iterable

from fcm_scout.common.parsing import parse_rating
from fcm_scout.domain.models import PlayerRecord, SearchCriteria


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def matches(player: PlayerRecord, criteria: SearchCriteria) -> bool:
    """True if *player* satisfies every constraint present in *criteria*."""
    if criteria.name is not None and not _contains(player.name, criteria.name):
        return False
    if criteria.position is not None and player.position != criteria.position:
        return False
    if criteria.club is not None and not _contains(player.club, criteria.club):
        return False
    if criteria.nation is not None and not _contains(player.nation, criteria.nation):
        return False

    if criteria.has_rating_bound:
        rating = parse_rating(player.rating)
        # an unparseable rating never satisfies a bound
        if rating is None:
            return False
        if criteria.min_rating is not None and rating < criteria.min_rating:
            return False
        if criteria.max_rating is not None and rating > criteria.max_rating:
            return False
    return True


def filter_players(players: Iterable[PlayerRecord], criteria: SearchCriteria) -> list[PlayerRecord]:
    """Return the players matching all supplied constraints, in input order."""
    if criteria.is_empty():
        return list(players)
    return [p for p in players if matches(p, criteria)]


__all__ = ["matches", "filter_players"]

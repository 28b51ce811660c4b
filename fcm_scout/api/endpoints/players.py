"""
Players API Endpoints
API Routen für Spielerlisten, Details und Suche
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from fcm_scout.api.dependencies import get_renderz_scraper, get_settings
from fcm_scout.api.models import (
    ErrorResponse,
    PlayerDetailResponse,
    PlayerListResponse,
    error_response,
)
from fcm_scout.common.errors import ScoutError
from fcm_scout.core.config import Settings
from fcm_scout.domain.filters import filter_players
from fcm_scout.domain.models import SearchCriteria
from fcm_scout.scrapers.renderz_scraper import RenderzScraper
from fcm_scout.storage.local_players import load_local_players

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def _log_failure(context: str, exc: Exception) -> None:
    if isinstance(exc, ScoutError):
        logger.error("%s: %s", context, exc)
    else:
        logger.exception("%s: unexpected error", context)


@router.get("/renderz-players", response_model=PlayerListResponse, responses=ERROR_RESPONSES)
async def renderz_players(scraper: RenderzScraper = Depends(get_renderz_scraper)):
    """Scrapes the RenderZ player list and returns it as JSON."""
    try:
        players = await scraper.scrape_players()
    except Exception as e:
        _log_failure("RenderZ scraping error", e)
        return error_response("Failed to retrieve or parse data from RenderZ.", str(e))
    return PlayerListResponse.of(players)


@router.get("/local-players", response_model=PlayerListResponse, responses=ERROR_RESPONSES)
def local_players(settings: Settings = Depends(get_settings)):
    """Serves the bundled fallback players file."""
    try:
        players = load_local_players(settings.local_players_path)
    except Exception as e:
        _log_failure("Local players error", e)
        return error_response("Failed to read local players.json", str(e))
    return PlayerListResponse.of(players)


@router.get("/player-details/{player_id}", response_model=PlayerDetailResponse, responses=ERROR_RESPONSES)
async def player_details(player_id: str, scraper: RenderzScraper = Depends(get_renderz_scraper)):
    """Scrapes the RenderZ detail page of one player."""
    try:
        player = await scraper.scrape_player_details(player_id)
    except Exception as e:
        _log_failure(f"Player details scraping error ({player_id})", e)
        return error_response("Failed to retrieve or parse player details from RenderZ.", str(e))
    return PlayerDetailResponse(data=player)


@router.get(
    "/search-players",
    response_model=PlayerListResponse,
    responses={**ERROR_RESPONSES, 422: {"model": ErrorResponse}},
)
async def search_players(
    name: Optional[str] = None,
    position: Optional[str] = None,
    min_rating: Optional[str] = Query(None, alias="minRating"),
    max_rating: Optional[str] = Query(None, alias="maxRating"),
    club: Optional[str] = None,
    nation: Optional[str] = None,
    scraper: RenderzScraper = Depends(get_renderz_scraper),
):
    """Scrapes the player list and filters it by the given constraints."""
    try:
        criteria = SearchCriteria(
            name=name,
            position=position,
            min_rating=min_rating,
            max_rating=max_rating,
            club=club,
            nation=nation,
        )
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        return error_response("Invalid search parameters.", f"not an integer: {fields}", status_code=422)

    try:
        players = await scraper.scrape_players()
    except Exception as e:
        _log_failure("Player search error", e)
        return error_response("Failed to search players.", str(e))

    matched = filter_players(players, criteria)
    logger.info("Search %s matched %d of %d players", criteria.model_dump(exclude_none=True), len(matched), len(players))
    return PlayerListResponse.of(matched)

"""
Redeem Codes API Endpoints
"""

import logging

from fastapi import APIRouter, Depends

from fcm_scout.api.dependencies import get_codes_scraper
from fcm_scout.api.models import CodeListResponse, ErrorResponse, error_response
from fcm_scout.common.errors import ScoutError
from fcm_scout.scrapers.codes_scraper import CodesScraper

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/redeem-codes", response_model=CodeListResponse, responses={500: {"model": ErrorResponse}})
async def redeem_codes(scraper: CodesScraper = Depends(get_codes_scraper)):
    """Scrapes the redeem-code forum; expiry status stays unknown."""
    try:
        codes = await scraper.scrape_codes()
    except ScoutError as e:
        logger.error("Redeem code scraping error: %s", e)
        return error_response("Failed to retrieve or parse redeem codes.", str(e))
    except Exception as e:
        logger.exception("Redeem code scraping error: unexpected error")
        return error_response("Failed to retrieve or parse redeem codes.", str(e))
    return CodeListResponse.of(codes)

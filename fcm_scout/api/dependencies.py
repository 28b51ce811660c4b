"""
API Dependencies
Dependency Injection für FastAPI
"""

from fastapi import Request

from fcm_scout.core.config import Settings
from fcm_scout.scrapers.codes_scraper import CodesScraper
from fcm_scout.scrapers.renderz_scraper import RenderzScraper


async def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_renderz_scraper(request: Request) -> RenderzScraper:
    """Dependency für den RenderZ-Scraper (zustandslos, pro App einmal gebaut)"""
    return request.app.state.renderz_scraper


async def get_codes_scraper(request: Request) -> CodesScraper:
    return request.app.state.codes_scraper

"""
Base classes and utilities for the upstream scrapers.
"""

from dataclasses import dataclass, field

from fcm_scout.common.http import fetch_text
from fcm_scout.common.logging_utils import get_logger
from fcm_scout.core.config import Settings

# =============================================================================
# 1. SCRAPING CONFIGURATION
# =============================================================================


@dataclass
class ScrapingConfig:
    """Konfiguration für Web Scraping"""

    base_url: str
    timeout: float = 30.0
    user_agents: list[str] = field(default_factory=list)
    rotate_user_agent: bool = False

    @classmethod
    def from_settings(cls, base_url: str, settings: Settings) -> "ScrapingConfig":
        return cls(
            base_url=base_url,
            timeout=settings.scraping_timeout,
            user_agents=settings.user_agent_pool(),
            rotate_user_agent=settings.rotate_user_agent,
        )


# =============================================================================
# 2. BASE SCRAPER
# =============================================================================


class BaseScraper:
    """Basisklasse für alle Scraper

    Stateless between calls: every ``fetch_page`` is one GET on its own
    short-lived HTTP session, with no retry.
    """

    def __init__(self, config: ScrapingConfig, name: str):
        self.config = config
        self.name = name
        self.logger = get_logger(f"scraper.{name}")

    async def fetch_page(self, url: str) -> str:
        """Lädt eine Webseite herunter (genau ein Versuch)"""
        self.logger.debug("GET %s", url)
        return await fetch_text(
            url,
            timeout=self.config.timeout,
            user_agents=self.config.user_agents or None,
            rotate_ua=self.config.rotate_user_agent,
        )

"""
RenderZ Scraper
Spielerliste und Spielerdetails von renderz.app

Zwei Seitentypen:
 1. Liste (/24/players): jeder Link auf /player/<id> ist eine Spielerkarte,
    Felder werden innerhalb der Karte gesucht.
 2. Detail (/24/player/<id>): Felder werden im gesamten Dokument gesucht
    ("find anything plausible"), Stats über alle stat-Klassen.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from bs4 import Tag

from fcm_scout.common.errors import ExtractionError
from fcm_scout.common.parsing import (
    absolute_url,
    extract_player_id_from_href,
    first_int,
    soup_from_html,
)
from fcm_scout.core.config import Settings
from fcm_scout.domain.models import PlayerRecord
from fcm_scout.scrapers.base import BaseScraper, ScrapingConfig
from fcm_scout.scrapers.strategies import Strategy, attr, extract_stats, first_match, text

# -------------------- List page strategies -------------------- #

CARD_SELECTOR = 'a[href*="/player/"]'

LIST_FIELDS: dict[str, tuple[Strategy, ...]] = {
    "name": text('span[class*="player-name"]', 'span[class*="name"]', '[class*="name"]'),
    "rating": text('div[class*="rating"]', 'span[class*="rating"]'),
    "position": text('div[class*="position"]', 'span[class*="position"]'),
    "alt_position": text(".alt-pos-label"),
    "club": text('[class*="club"]', '[class*="team"]'),
    "nation": text('[class*="nation"]', '[class*="country"]'),
}
LIST_IMAGE = attr("src", "img[src]") + attr("data-src", "img[data-src]")
LIST_PACE = text(".stat-pace-value")

# -------------------- Detail page strategies -------------------- #

DETAIL_FIELDS: dict[str, tuple[Strategy, ...]] = {
    "name": text("h1", ".player-name", ".name"),
    "rating": text(".rating", ".ovr"),
    "position": text(".position"),
    "club": text(".club", ".team"),
    "nation": text(".nation", ".country"),
}
DETAIL_IMAGE = attr("src", ".player-card img", ".card img") + attr(
    "data-src", ".player-card img", ".card img"
)
DETAIL_ATTRIBUTES: dict[str, tuple[Strategy, ...]] = {
    "height": text(".height", ".player-height"),
    "weight": text(".weight", ".player-weight"),
    "foot": text(".foot", ".preferred-foot"),
    "age": text(".age", ".player-age"),
    "work_rates": text(".work-rates", ".workrates"),
    "weak_foot": text(".weak-foot", ".weakfoot"),
    "skill_moves": text(".skill-moves", ".skills"),
}


def parse_player_card(card: Tag, base_url: str) -> PlayerRecord:
    fields = {name: first_match(card, strategies) for name, strategies in LIST_FIELDS.items()}
    stats: dict[str, int] = {}
    pace = first_int(first_match(card, LIST_PACE))
    if pace is not None:
        stats["pace"] = pace
    return PlayerRecord(
        id=extract_player_id_from_href(card.get("href")),
        card_url=absolute_url(base_url, first_match(card, LIST_IMAGE)),
        stats=stats,
        **fields,
    )


def extract_player_list(html: str, base_url: str) -> list[PlayerRecord]:
    """All player cards of a list page, in page order. No cards -> []."""
    soup = soup_from_html(html)
    return [parse_player_card(card, base_url) for card in soup.select(CARD_SELECTOR)]


def extract_player_detail(html: str, player_id: str, base_url: str) -> PlayerRecord:
    """Detail record for *player_id*; fields nothing matched stay "" / None."""
    soup = soup_from_html(html)
    fields = {name: first_match(soup, strategies) for name, strategies in DETAIL_FIELDS.items()}
    attributes = {name: first_match(soup, strategies) or None for name, strategies in DETAIL_ATTRIBUTES.items()}
    return PlayerRecord(
        id=player_id,
        card_url=absolute_url(base_url, first_match(soup, DETAIL_IMAGE)),
        stats=extract_stats(soup),
        attributes=attributes,
        **fields,
    )


class RenderzScraper(BaseScraper):
    """Scraper für renderz.app"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        config = ScrapingConfig.from_settings(self.settings.renderz_base_url, self.settings)
        super().__init__(config, "renderz")

    def player_url(self, player_id: str) -> str:
        return f"{self.settings.renderz_player_url.rstrip('/')}/{quote(player_id, safe='')}"

    async def scrape_players(self) -> list[PlayerRecord]:
        """Lädt die Spielerliste und extrahiert alle Karten."""
        url = self.settings.renderz_players_url
        html = await self.fetch_page(url)
        try:
            players = extract_player_list(html, self.config.base_url)
        except Exception as e:
            raise ExtractionError(f"Failed to parse player list from {url}: {e}") from e
        self.logger.info("Extracted %d players from %s", len(players), url)
        return players

    async def scrape_player_details(self, player_id: str) -> PlayerRecord:
        """Lädt und extrahiert die Detailseite eines Spielers."""
        url = self.player_url(player_id)
        html = await self.fetch_page(url)
        try:
            return extract_player_detail(html, player_id, self.config.base_url)
        except Exception as e:
            raise ExtractionError(f"Failed to parse player details from {url}: {e}") from e

"""
Redeem-Code Scraper
Codes aus dem FC Mobile Forum

Strategie:
 1. Strukturierte Code-Blöcke (.code-element / .code-item mit .code-Kind)
 2. Fallback: Regex über den sichtbaren Seitentext
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

from fcm_scout.common.errors import ExtractionError
from fcm_scout.common.parsing import clean_text, soup_from_html
from fcm_scout.core.config import Settings
from fcm_scout.domain.models import CodeRecord
from fcm_scout.scrapers.base import BaseScraper, ScrapingConfig
from fcm_scout.scrapers.strategies import first_match, text

CODE_BLOCK_SELECTOR = ".code-element, .code-item"
CODE_FIELD = text(".code")
DESCRIPTION_FIELD = text(".description")
REWARDS_FIELD = text(".rewards")

CODE_RE = re.compile(r"\b[A-Z0-9]{8,15}\b")
_HAS_LETTER_RE = re.compile(r"[A-Z]")


def _looks_like_code(candidate: str) -> bool:
    return bool(CODE_RE.fullmatch(candidate)) and bool(_HAS_LETTER_RE.search(candidate))


def extract_codes(html: str, source: str, *, now: Optional[datetime] = None) -> list[CodeRecord]:
    """Codes of a forum page in page order; a code repeated on the page is kept once."""
    soup = soup_from_html(html)
    stamp = now or datetime.now(timezone.utc)
    records: dict[str, CodeRecord] = {}

    for block in soup.select(CODE_BLOCK_SELECTOR):
        code = first_match(block, CODE_FIELD).upper()
        if not code or code in records:
            continue
        rewards = [clean_text(r) for r in first_match(block, REWARDS_FIELD).split(",")]
        records[code] = CodeRecord(
            code=code,
            source=source,
            timestamp=stamp,
            description=first_match(block, DESCRIPTION_FIELD) or None,
            rewards=[r for r in rewards if r],
        )
    if records:
        return list(records.values())

    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    for match in CODE_RE.finditer(soup.get_text(" ")):
        code = match.group(0)
        if code in records or not _looks_like_code(code):
            continue
        records[code] = CodeRecord(code=code, source=source, timestamp=stamp)
    return list(records.values())


class CodesScraper(BaseScraper):
    """Scraper für Redeem-Codes"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        config = ScrapingConfig.from_settings(self.settings.codes_source_url, self.settings)
        super().__init__(config, "codes")

    async def scrape_codes(self) -> list[CodeRecord]:
        url = self.settings.codes_source_url
        html = await self.fetch_page(url)
        try:
            codes = extract_codes(html, self.settings.codes_source_label)
        except Exception as e:
            raise ExtractionError(f"Failed to parse redeem codes from {url}: {e}") from e
        self.logger.info("Extracted %d codes from %s", len(codes), url)
        return codes

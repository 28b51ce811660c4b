import re
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

PLAYER_HREF_RE = re.compile(r"/player/([\w-]+)")
DIGITS_RE = re.compile(r"\d+")
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def clean_text(s: Optional[str]) -> str:
    if not s:
        return ""
    return re.sub(r"\s+", " ", s.strip())


def first_int(s: Optional[str]) -> Optional[int]:
    """First run of digits in *s* as int ("PAC: 95" -> 95)."""
    if not s:
        return None
    m = DIGITS_RE.search(s)
    return int(m.group(0)) if m else None


def parse_rating(s: Optional[str]) -> Optional[int]:
    """Leading integer of a rating text ("95" -> 95, "95 OVR" -> 95, "Unknown" -> None)."""
    if not s:
        return None
    m = LEADING_INT_RE.match(s)
    return int(m.group(1)) if m else None


def soup_from_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


def extract_player_id_from_href(href: Optional[str]) -> str:
    # Examples: /24/player/12345, https://renderz.app/24/player/lionel-messi-94
    if not href:
        return ""
    m = PLAYER_HREF_RE.search(href)
    return m.group(1) if m else ""


def absolute_url(base_url: str, src: Optional[str]) -> str:
    """Resolve a possibly relative image/link path against the site origin."""
    if not src:
        return ""
    src = src.strip()
    if src.startswith(("http://", "https://", "data:")):
        return src
    return urljoin(base_url.rstrip("/") + "/", src)

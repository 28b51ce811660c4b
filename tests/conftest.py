"""Global pytest fixtures for the test suite.

Centralizes:
 - Project root path insertion (so individual tests don't repeat sys.path hacks)
 - Reusable HTML sample snippets for RenderZ list/detail pages and the code forum
 - Fake HTTP sessions and fake scrapers so no test touches the network
"""

import sys
from pathlib import Path
from typing import Union

import pytest

# Ensure project root (containing fcm_scout/) is on sys.path once
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fcm_scout.common.http import fetch_text  # noqa: E402
from fcm_scout.core.config import Settings  # noqa: E402
from fcm_scout.scrapers.codes_scraper import CodesScraper  # noqa: E402
from fcm_scout.scrapers.renderz_scraper import RenderzScraper  # noqa: E402


# -------------------- Fake HTTP session -------------------- #

class FakeResponse:
    def __init__(self, status: int = 200, body: str = ""):
        self.status = status
        self.body = body

    async def text(self) -> str:
        return self.body


class _FakeRequest:
    def __init__(self, outcome):
        self.outcome = outcome

    async def __aenter__(self):
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession.get(); *outcome* is a response or an exception."""

    def __init__(self, outcome: Union[FakeResponse, BaseException]):
        self.outcome = outcome
        self.calls: list[tuple[str, dict]] = []

    def get(self, url, headers=None):
        self.calls.append((url, headers or {}))
        return _FakeRequest(self.outcome)


@pytest.fixture
def fake_session_cls():
    return FakeSession


@pytest.fixture
def fake_response_cls():
    return FakeResponse


# -------------------- Fake scrapers -------------------- #

class FakeRenderzScraper(RenderzScraper):
    """RenderZ scraper whose pages come from a dict: url -> html or FakeSession outcome."""

    def __init__(self, pages: dict, settings: Settings = None):
        super().__init__(settings or Settings())
        self.pages = pages
        self.requested: list[str] = []

    async def fetch_page(self, url: str) -> str:
        self.requested.append(url)
        page = self.pages.get(url, FakeResponse(404, "not found"))
        if isinstance(page, str):
            page = FakeResponse(200, page)
        return await fetch_text(url, timeout=self.config.timeout, session=FakeSession(page))


class FakeCodesScraper(CodesScraper):
    def __init__(self, page, settings: Settings = None):
        super().__init__(settings or Settings())
        self.page = page

    async def fetch_page(self, url: str) -> str:
        page = FakeResponse(200, self.page) if isinstance(self.page, str) else self.page
        return await fetch_text(url, timeout=self.config.timeout, session=FakeSession(page))


@pytest.fixture
def fake_renderz_cls():
    return FakeRenderzScraper


@pytest.fixture
def fake_codes_cls():
    return FakeCodesScraper


# -------------------- HTML Fixtures -------------------- #

@pytest.fixture
def sample_players_html():
    return (
        """
        <html>
        <body>
            <nav><a href="/24/players?page=2">Next page</a></nav>
            <div class="players-grid">
                <a href="/24/player/kylian-mbappe-97" class="card_link__a1">
                    <img src="/images/24/players/mbappe.png" alt="Mbappé" />
                    <div class="card_rating__x1">97</div>
                    <div class="card_position__y2">ST</div>
                    <span class="alt-pos-label">LW</span>
                    <span class="card_player-name__z3">Kylian Mbappé</span>
                    <span class="card_club__q4">Real Madrid</span>
                    <span class="card_nation__r5">France</span>
                    <span class="stat-pace-value">99</span>
                </a>
                <a href="https://renderz.app/24/player/erling-haaland-96">
                    <img data-src="https://cdn.renderz.app/haaland.png" />
                    <span class="rating">96</span>
                    <span class="position">ST</span>
                    <span class="name">Erling Haaland</span>
                    <span class="team">Manchester City</span>
                    <span class="country">Norway</span>
                </a>
                <a href="/24/player/mystery">
                    <span class="name">Mystery Man</span>
                    <div class="rating">Unknown</div>
                </a>
            </div>
        </body>
        </html>
        """
    )


@pytest.fixture
def sample_player_detail_html():
    return (
        """
        <html>
        <head><title>Kylian Mbappé - RenderZ</title></head>
        <body>
            <header><div class="logo">RenderZ</div></header>
            <h1>Kylian Mbappé</h1>
            <div class="player-card"><img src="/images/24/players/mbappe-card.png" /></div>
            <div class="ovr">97</div>
            <div class="position">ST</div>
            <div class="team">Real Madrid</div>
            <div class="nation">France</div>
            <div class="player-stats">
                <div class="stat">PAC: 99</div>
                <div class="stat">Shooting 96</div>
                <div class="stat">88 PAS</div>
                <div class="stat-row"><span class="stat-label">DRI</span> <span class="stat-value">97</span></div>
                <div class="stat">DEFENDING 41</div>
                <div class="stat">PHY 86</div>
                <div class="stat">PAC 12</div>
            </div>
            <ul class="details">
                <li class="height">178 cm</li>
                <li class="preferred-foot">Right</li>
                <li class="weakfoot">4</li>
                <li class="skill-moves">5</li>
            </ul>
        </body>
        </html>
        """
    )


@pytest.fixture
def sample_codes_html():
    return (
        """
        <html>
        <body>
            <div class="code-element">
                <span class="code">BUNDLEBOOST</span>
                <p class="description">Bundle boost pack</p>
                <p class="rewards">500 Gems, 1 Player Pack</p>
            </div>
            <div class="code-element"><span class="code">fcm2024gift</span></div>
            <div class="code-element"><span class="code">BUNDLEBOOST</span></div>
            <div class="code-element"><span class="code"> </span></div>
        </body>
        </html>
        """
    )


@pytest.fixture
def sample_codes_text_html():
    return (
        """
        <html>
        <head>
            <script>var TOKEN = "ABCDEFGHIJ";</script>
            <style>.HEADERBANNER { color: red; }</style>
        </head>
        <body>
            <h2>Latest codes</h2>
            <p>Use FCMGIFT2024 before Friday, or try SUMMER24BOOST.</p>
            <p>Order 12345678 is not a code. FCMGIFT2024 again.</p>
        </body>
        </html>
        """
    )

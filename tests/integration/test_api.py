import asyncio
import json

import pytest
from fastapi.testclient import TestClient

from fcm_scout.api import main as api_main
from fcm_scout.api.main import RateLimiter, create_fastapi_app
from fcm_scout.core.config import Settings

PLAYERS_URL = "https://renderz.app/24/players"
PLAYER_URL = "https://renderz.app/24/player"


@pytest.fixture
def settings(tmp_path):
    local = tmp_path / "players.json"
    local.write_text(
        json.dumps([{"id": "1", "name": "Local Legend", "rating": "90", "position": "GK"}]),
        encoding="utf-8",
    )
    return Settings(
        renderz_players_url=PLAYERS_URL,
        renderz_player_url=PLAYER_URL,
        local_players_path=str(local),
    )


@pytest.fixture
def build_client(settings, fake_renderz_cls, fake_codes_cls):
    def _build(pages=None, codes_page="<html></html>", **overrides):
        cfg = settings.model_copy(update=overrides) if overrides else settings
        app = create_fastapi_app(
            cfg,
            renderz_scraper=fake_renderz_cls(pages or {}, cfg),
            codes_scraper=fake_codes_cls(codes_page, cfg),
        )
        return TestClient(app)

    return _build


def _assert_error(resp, status_code=500):
    assert resp.status_code == status_code
    body = resp.json()
    assert body["status"] == "error"
    assert body["message"]
    assert "details" in body
    return body


def test_routes_present_in_openapi(build_client):
    with build_client() as client:
        paths = client.get("/openapi.json").json()["paths"]
    for expected in (
        "/health",
        "/api/renderz-players",
        "/api/local-players",
        "/api/player-details/{player_id}",
        "/api/search-players",
        "/api/redeem-codes",
    ):
        assert expected in paths


def test_renderz_players(build_client, sample_players_html):
    with build_client({PLAYERS_URL: sample_players_html}) as client:
        resp = client.get("/api/renderz-players")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert body["count"] == 3 == len(body["data"])
    assert body["data"][0]["name"] == "Kylian Mbappé"
    assert body["data"][0]["stats"] == {"pace": 99}


def test_renderz_players_upstream_timeout(build_client):
    with build_client({PLAYERS_URL: asyncio.TimeoutError()}) as client:
        resp = client.get("/api/renderz-players")

    body = _assert_error(resp)
    assert "timed out" in body["details"]


def test_renderz_players_upstream_status(build_client):
    # unknown URL -> fake upstream answers 404
    with build_client({}) as client:
        resp = client.get("/api/renderz-players")

    body = _assert_error(resp)
    assert "HTTP 404" in body["details"]


def test_local_players(build_client):
    with build_client() as client:
        resp = client.get("/api/local-players")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert body["count"] == 1
    assert body["data"][0]["name"] == "Local Legend"
    assert body["data"][0]["stats"] == {}


def test_local_players_unreadable(build_client, tmp_path):
    with build_client(local_players_path=str(tmp_path / "missing.json")) as client:
        resp = client.get("/api/local-players")

    body = _assert_error(resp)
    assert body["message"] == "Failed to read local players.json"


def test_player_details(build_client, sample_player_detail_html):
    pages = {f"{PLAYER_URL}/kylian-mbappe-97": sample_player_detail_html}
    with build_client(pages) as client:
        resp = client.get("/api/player-details/kylian-mbappe-97")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    player = body["data"]
    assert player["id"] == "kylian-mbappe-97"
    assert player["rating"] == "97"
    assert player["stats"]["dribbling"] == 97
    assert player["attributes"]["height"] == "178 cm"
    assert player["attributes"]["age"] is None


def test_player_details_unrecognised_markup(build_client):
    pages = {f"{PLAYER_URL}/42": "<html><body>Coming soon</body></html>"}
    with build_client(pages) as client:
        resp = client.get("/api/player-details/42")

    assert resp.status_code == 200
    player = resp.json()["data"]
    assert player["name"] == ""
    assert player["stats"] == {}


def test_player_details_upstream_failure(build_client):
    with build_client({}) as client:
        resp = client.get("/api/player-details/does-not-exist")

    _assert_error(resp)


def test_search_players(build_client, sample_players_html):
    with build_client({PLAYERS_URL: sample_players_html}) as client:
        resp = client.get("/api/search-players", params={"position": "ST", "minRating": "97"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 1
    assert body["data"][0]["id"] == "kylian-mbappe-97"


def test_search_players_blank_params_return_everything(build_client, sample_players_html):
    with build_client({PLAYERS_URL: sample_players_html}) as client:
        resp = client.get("/api/search-players?name=&position=&minRating=&maxRating=&club=&nation=")

    assert resp.status_code == 200
    assert resp.json()["count"] == 3


def test_search_players_rating_bound_excludes_unknown(build_client, sample_players_html):
    with build_client({PLAYERS_URL: sample_players_html}) as client:
        resp = client.get("/api/search-players", params={"maxRating": "99"})

    ids = [p["id"] for p in resp.json()["data"]]
    assert ids == ["kylian-mbappe-97", "erling-haaland-96"]


def test_search_players_invalid_rating(build_client, sample_players_html):
    with build_client({PLAYERS_URL: sample_players_html}) as client:
        resp = client.get("/api/search-players", params={"minRating": "ninety"})

    body = _assert_error(resp, status_code=422)
    assert "min_rating" in body["details"]


def test_search_players_upstream_failure(build_client):
    with build_client({PLAYERS_URL: asyncio.TimeoutError()}) as client:
        resp = client.get("/api/search-players", params={"name": "messi"})

    body = _assert_error(resp)
    assert body["message"] == "Failed to search players."


def test_redeem_codes(build_client, sample_codes_html):
    with build_client(codes_page=sample_codes_html) as client:
        resp = client.get("/api/redeem-codes")

    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 2
    assert body["data"][0]["code"] == "BUNDLEBOOST"
    assert body["data"][0]["status"] == "unknown"


def test_redeem_codes_upstream_failure(build_client, fake_response_cls):
    with build_client(codes_page=fake_response_cls(503, "down")) as client:
        resp = client.get("/api/redeem-codes")

    _assert_error(resp)


def test_rate_limit(build_client):
    with build_client(rate_limit_requests_per_minute=2) as client:
        statuses = [client.get("/health").status_code for _ in range(3)]

    assert statuses == [200, 200, 429]


def test_rate_limiter_evicts_idle_clients():
    limiter = RateLimiter(max_requests=1, window_seconds=60)

    assert limiter.allow("10.0.0.1", now=0.0)
    assert not limiter.allow("10.0.0.1", now=30.0)
    assert limiter.allow("10.0.0.2", now=61.0)

    assert list(limiter.buckets) == ["10.0.0.2"]


def test_startup_configures_logging(build_client, monkeypatch):
    calls = []
    monkeypatch.setattr(api_main, "configure_logging", lambda *a, **kw: calls.append(kw))

    with build_client(log_level="DEBUG", log_format="json") as client:
        client.get("/health")

    assert calls == [{"service": "fcm-scout-api", "level": "DEBUG", "fmt": "json"}]

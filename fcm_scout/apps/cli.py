"""
Command-line interface for the API server and one-off scrapes.
Usage examples:
  python -m fcm_scout.apps.cli serve --port 3000
  python -m fcm_scout.apps.cli players
  python -m fcm_scout.apps.cli player kylian-mbappe-97
  python -m fcm_scout.apps.cli search --position ST --min-rating 90
  python -m fcm_scout.apps.cli codes
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from fcm_scout.api.models import CodeListResponse, PlayerDetailResponse, PlayerListResponse
from fcm_scout.common.errors import ScoutError
from fcm_scout.common.logging_utils import configure_logging, get_logger
from fcm_scout.core.config import Settings
from fcm_scout.domain.filters import filter_players
from fcm_scout.domain.models import SearchCriteria
from fcm_scout.scrapers.codes_scraper import CodesScraper
from fcm_scout.scrapers.renderz_scraper import RenderzScraper

logger = get_logger("fcm_scout.cli")


def _print(model) -> None:
    print(json.dumps(model.model_dump(mode="json"), indent=2, ensure_ascii=False))


async def cmd_players(settings: Settings) -> None:
    players = await RenderzScraper(settings).scrape_players()
    _print(PlayerListResponse.of(players))


async def cmd_player(settings: Settings, player_id: str) -> None:
    player = await RenderzScraper(settings).scrape_player_details(player_id)
    _print(PlayerDetailResponse(data=player))


async def cmd_search(settings: Settings, criteria: SearchCriteria) -> None:
    players = await RenderzScraper(settings).scrape_players()
    _print(PlayerListResponse.of(filter_players(players, criteria)))


async def cmd_codes(settings: Settings) -> None:
    codes = await CodesScraper(settings).scrape_codes()
    _print(CodeListResponse.of(codes))


def cmd_serve(settings: Settings, host: Optional[str], port: Optional[int]) -> None:
    import uvicorn

    from fcm_scout.api.main import create_fastapi_app

    app = create_fastapi_app(settings)
    uvicorn.run(app, host=host or settings.api_host, port=port or settings.api_port, log_config=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fcm-scout", description="FCM Scout")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the JSON API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    sub.add_parser("players", help="Scrape the RenderZ player list")

    player = sub.add_parser("player", help="Scrape one RenderZ player detail page")
    player.add_argument("player_id")

    search = sub.add_parser("search", help="Scrape the player list and filter it")
    search.add_argument("--name")
    search.add_argument("--position")
    search.add_argument("--min-rating", type=int)
    search.add_argument("--max-rating", type=int)
    search.add_argument("--club")
    search.add_argument("--nation")

    sub.add_parser("codes", help="Scrape redeem codes from the forum")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(service="fcm-scout", level=settings.log_level, fmt=settings.log_format)

    if args.command == "serve":
        cmd_serve(settings, args.host, args.port)
        return 0

    if args.command == "players":
        job = cmd_players(settings)
    elif args.command == "player":
        job = cmd_player(settings, args.player_id)
    elif args.command == "search":
        criteria = SearchCriteria(
            name=args.name,
            position=args.position,
            min_rating=args.min_rating,
            max_rating=args.max_rating,
            club=args.club,
            nation=args.nation,
        )
        job = cmd_search(settings, criteria)
    else:
        job = cmd_codes(settings)

    try:
        asyncio.run(job)
    except ScoutError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Smoke-test the API in-process: /health plus one live scrape per upstream route.

Usage:
  python scripts/api_health_smoke.py            # health + local players only
  python scripts/api_health_smoke.py --live     # also hit RenderZ and the code forum
"""

import argparse
import asyncio
import sys
import traceback
from pathlib import Path

# Ensure project root on path
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root))

import httpx

from fcm_scout.api.main import create_fastapi_app
from fcm_scout.core.config import Settings

OFFLINE_ROUTES = ["/health", "/api/local-players"]
LIVE_ROUTES = ["/api/renderz-players", "/api/search-players?position=ST", "/api/redeem-codes"]


async def main(live: bool) -> int:
    settings = Settings()
    failures = 0
    try:
        app = create_fastapi_app(settings)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test", timeout=60) as client:
            for path in OFFLINE_ROUTES + (LIVE_ROUTES if live else []):
                resp = await client.get(path)
                body = resp.json()
                summary = body.get("count", body.get("message", body.get("status")))
                print(f"{path}: {resp.status_code} {summary}", flush=True)
                failures += resp.status_code != 200
    except Exception as e:
        print("API smoke failed:", e, flush=True)
        print(traceback.format_exc(), flush=True)
        return 1
    return 1 if failures else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--live", action="store_true", help="also scrape the upstream sites")
    sys.exit(asyncio.run(main(parser.parse_args().live)))

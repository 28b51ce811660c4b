import asyncio
import random
from typing import Optional

import aiohttp

from fcm_scout.common.errors import UpstreamFetchError

# Shared defaults
DEFAULT_UAS: list[str] = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.4 Safari/605.1.15",
]
ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
ACCEPT_LANGUAGE = "en-US,en;q=0.9"


def build_headers(user_agent: str) -> dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Accept": ACCEPT_HTML,
        "Accept-Language": ACCEPT_LANGUAGE,
    }


def pick_user_agent(ua_pool: Optional[list[str]], *, rotate: bool = False) -> str:
    pool = ua_pool or DEFAULT_UAS
    return random.choice(pool) if rotate else pool[0]


async def fetch_text(
    url: str,
    *,
    timeout: float,
    user_agents: Optional[list[str]] = None,
    rotate_ua: bool = False,
    session: Optional[aiohttp.ClientSession] = None,
) -> str:
    """Issue exactly one GET and return the body as text.

    Timeouts, connection errors and non-2xx statuses are raised as
    ``UpstreamFetchError``. A caller-supplied *session* is left open; otherwise
    a short-lived session is created and closed around the request.
    """
    headers = build_headers(pick_user_agent(user_agents, rotate=rotate_ua))
    owns_session = session is None
    if owns_session:
        session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
    try:
        async with session.get(url, headers=headers) as response:
            if not 200 <= response.status < 300:
                raise UpstreamFetchError(url, f"HTTP {response.status}", status=response.status)
            return await response.text()
    except asyncio.TimeoutError as e:
        raise UpstreamFetchError(url, f"timed out after {timeout:g}s") from e
    except aiohttp.ClientError as e:
        raise UpstreamFetchError(url, str(e) or type(e).__name__) from e
    finally:
        if owns_session:
            await session.close()


__all__ = [
    "DEFAULT_UAS",
    "build_headers",
    "pick_user_agent",
    "fetch_text",
]

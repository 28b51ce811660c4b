"""
FastAPI Application Main
Hauptanwendung für die FCM Scout API
"""

import logging
import time
from collections import deque
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from fcm_scout.api.models import HealthResponse
from fcm_scout.common.logging_utils import configure_logging
from fcm_scout.core.config import Settings
from fcm_scout.scrapers.codes_scraper import CodesScraper
from fcm_scout.scrapers.renderz_scraper import RenderzScraper

ROUTES = {
    "Player list": "/api/renderz-players",
    "Player details": "/api/player-details/{id}",
    "Search players": "/api/search-players?name=messi",
    "Local players": "/api/local-players",
    "Redeem codes": "/api/redeem-codes",
    "Healthcheck": "/health",
}


class RateLimiter:
    """Sliding-window request counter per client IP.

    Clients whose newest request left the window are evicted, so the map
    only holds clients seen within the last window.
    """

    def __init__(self, max_requests: int, window_seconds: float = 60):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.buckets: dict[str, deque] = {}

    def allow(self, client_ip: str, now: float) -> bool:
        cutoff = now - self.window_seconds
        stale = [ip for ip, times in self.buckets.items() if times[-1] < cutoff]
        for ip in stale:
            del self.buckets[ip]

        times = self.buckets.setdefault(client_ip, deque())
        # Drop outdated timestamps
        while times and times[0] < cutoff:
            times.popleft()
        if len(times) >= self.max_requests:
            return False
        times.append(now)
        return True


def create_fastapi_app(
    settings: Settings,
    *,
    renderz_scraper: Optional[RenderzScraper] = None,
    codes_scraper: Optional[CodesScraper] = None,
) -> FastAPI:
    """Factory function to create the FastAPI app.

    Scrapers can be injected (tests pass fakes); otherwise they are built
    from *settings*. Neither keeps state between requests.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application Lifespan Management"""
        configure_logging(service="fcm-scout-api", level=settings.log_level, fmt=settings.log_format)
        logger = logging.getLogger(__name__)
        logger.info("Starting FCM Scout API (environment=%s)", settings.environment)
        base = f"http://localhost:{settings.api_port}"
        for label, path in ROUTES.items():
            logger.info("%s: %s%s", label, base, path)
        yield
        logger.info("Shutting down FCM Scout API")

    app = FastAPI(
        title="FCM Scout API",
        description="RenderZ player data and FC Mobile redeem codes as JSON",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.renderz_scraper = renderz_scraper or RenderzScraper(settings)
    app.state.codes_scraper = codes_scraper or CodesScraper(settings)

    # CORS Middleware (tighten in non-development)
    cors_origins = settings.cors_origins
    if settings.environment != "development":
        cors_origins = [o for o in cors_origins if o != "*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Simple in-memory rate limit (per-IP) if enabled
    if settings.rate_limit_requests_per_minute > 0:
        window_seconds = 60
        max_requests = settings.rate_limit_requests_per_minute
        limiter = RateLimiter(max_requests, window_seconds)
        app.state.rate_limiter = limiter

        @app.middleware("http")
        async def rate_limit_middleware(request: Request, call_next):
            client_ip = request.client.host if request.client else "unknown"
            if not limiter.allow(client_ip, time.monotonic()):
                return JSONResponse(
                    status_code=429,
                    content={"status": "error", "message": "Too many requests", "details": None},
                )
            return await call_next(request)

    access_logger = logging.getLogger("fcm_scout.access")

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        access_logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def root():
        """Root endpoint with links to the API routes"""
        items = "\n".join(
            f'<li><a href="{path}">{label}</a></li>' for label, path in ROUTES.items()
        )
        return f"""
        <html>
            <head>
                <title>FCM Scout API</title>
            </head>
            <body>
                <h1>FCM Scout API</h1>
                <ul>
                    <li><a href="/docs">API Documentation (Swagger)</a></li>
                    {items}
                </ul>
            </body>
        </html>
        """

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Basic health check endpoint (never touches upstream sites)"""
        return HealthResponse(status="ok")

    # Include aggregated API router
    from fcm_scout.api.router import api_router
    app.include_router(api_router, prefix="/api")

    return app


# --- ASGI app instantiation for Uvicorn (fcm_scout.api.main:app) ---

app = create_fastapi_app(Settings())

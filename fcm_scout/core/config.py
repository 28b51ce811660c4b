"""
Zentrale Konfiguration für FCM Scout
Basiert auf Pydantic Settings mit Environment Variable Support
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOCAL_PLAYERS_PATH = PACKAGE_ROOT / "data" / "players.json"


class Settings(BaseSettings):
    """Application Settings mit Environment Variable Support"""

    # Upstream sites
    renderz_base_url: str = "https://renderz.app"
    renderz_players_url: str = "https://renderz.app/24/players"
    renderz_player_url: str = "https://renderz.app/24/player"
    codes_source_url: str = "https://www.fcmobileforum.com/fcmobile-redeem-codes"
    codes_source_label: str = "FC Mobile Forum"

    # Local fallback data (read-only)
    local_players_path: str = str(DEFAULT_LOCAL_PLAYERS_PATH)

    # Scraping (single GET per request, no retries)
    scraping_timeout: float = 30.0
    user_agents: list[str] = [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    ]
    # Pick a random entry of the pool per request instead of the first one
    rotate_user_agent: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Monitoring
    log_level: str = "INFO"
    log_format: str = "console"  # console | json

    # Application
    environment: str = "development"  # Environment: development, staging, production

    # Security
    cors_origins: list[str] = ["*"]
    # API rate limiting (requests per minute per IP); 0 disables
    rate_limit_requests_per_minute: int = 0

    # Optional path to a newline separated User-Agent file; overrides user_agents
    user_agents_file: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def user_agent_pool(self) -> list[str]:
        """Return the effective User-Agent pool (file entries win over the list)."""
        if self.user_agents_file and Path(self.user_agents_file).is_file():
            lines = Path(self.user_agents_file).read_text(encoding="utf-8").splitlines()
            pool = [line.strip() for line in lines if line.strip()]
            if pool:
                return pool
        return list(self.user_agents)


# Global Settings Instance
settings = Settings()

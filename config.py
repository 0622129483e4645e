"""
Configurazione globale per la ricerca locale Brave.
"""
from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

load_dotenv()


@dataclass
class RateLimitConfig:
    """Limiti di chiamata verso la Brave Search API."""
    per_second: int = 1
    per_month: int = 15000
    block: bool = True


@dataclass
class AppConfig:
    """Configurazione globale applicazione."""

    # Generale
    app_name: str = "Brave Local Search"
    version: str = "1.0.0"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_to_file: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    log_dir: str = os.getenv("LOG_DIR", "logs")
    log_name: str = "brave_local_search"

    # Brave Search API
    brave_api_key: str = os.getenv("BRAVE_API_KEY", "")
    brave_api_base_url: str = os.getenv(
        "BRAVE_API_BASE_URL", "https://api.search.brave.com/res/v1"
    )
    request_timeout: int = int(os.getenv("BRAVE_TIMEOUT", "30"))

    # Rate limiting
    rate_limit: Optional[RateLimitConfig] = None

    def __post_init__(self):
        if self.rate_limit is None:
            self.rate_limit = RateLimitConfig(
                per_second=int(os.getenv("RATE_LIMIT_PER_SECOND", "1")),
                per_month=int(os.getenv("RATE_LIMIT_PER_MONTH", "15000")),
                block=os.getenv("RATE_LIMIT_BLOCK", "true").lower() == "true",
            )


# Limiti argomenti dei tool
DEFAULT_LOCAL_COUNT: int = 5
DEFAULT_WEB_COUNT: int = 10
MAX_COUNT: int = 20  # page size massima accettata dall'API
MAX_OFFSET: int = 9

# Lingua fissa per la ricerca locations
SEARCH_LANG: str = "en"

# Istanza configurazione globale
config = AppConfig()

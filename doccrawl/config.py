"""Centralised settings for doccrawl.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the current working
directory (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from doccrawl.errors import ConfigurationError

load_dotenv(Path.cwd() / ".env", override=False)

DEFAULT_API_URL = "https://api.firecrawl.dev"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Extraction service
    # ------------------------------------------------------------------
    firecrawl_api_url: str = field(
        default_factory=lambda: os.environ.get("FIRECRAWL_API_URL", DEFAULT_API_URL)
    )
    firecrawl_api_key: str = field(
        default_factory=lambda: os.environ.get("FIRECRAWL_API_KEY", "")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "60.0"))
    )

    @property
    def scrape_endpoint(self) -> str:
        """Full URL of the single-page scrape endpoint."""
        return f"{self.firecrawl_api_url.rstrip('/')}/v1/scrape"

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_root: Path = field(
        default_factory=lambda: Path(os.environ.get("DOCCRAWL_OUTPUT_ROOT", Path.cwd()))
    )

    # ------------------------------------------------------------------
    # Crawl
    # ------------------------------------------------------------------
    max_concurrent_pages: int = field(
        default_factory=lambda: int(os.environ.get("DOCCRAWL_MAX_CONCURRENT_PAGES", "1"))
    )

    def require_api_key(self) -> str:
        """Return the API key, or raise :class:`ConfigurationError` if unset."""
        if not self.firecrawl_api_key:
            raise ConfigurationError(
                "FIRECRAWL_API_KEY must be set (environment or .env file)"
            )
        return self.firecrawl_api_key


# Module-level singleton, read only by the CLI:
#   from doccrawl.config import settings
settings = Settings()

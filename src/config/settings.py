# src/config/settings.py

"""Central configuration for the QuickFind search backend."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the QuickFind search backend."""

    # --- Server ---
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    SEARCH_DELAY: float = 1.0           # Seconds, for ?delay=true
    KEEP_ALIVE_TIMEOUT: int = 60        # Seconds an idle connection stays open

    # --- Store ---
    STORE_ID: str = "daraz"
    STORE_NAME: str = "Daraz"
    HOMEPAGE_URL: str = "https://www.daraz.com.np/"
    SEARCH_URL_TEMPLATE: str = "https://www.daraz.com.np/catalog/?q={query}"
    DETAIL_URL_TEMPLATE: str = (
        "https://www.daraz.com.np/products/i{product_id}.html"
    )

    # --- Scraping ---
    REQUEST_TIMEOUT: int = 120          # Seconds before a request times out
    HEALTH_TIMEOUT: int = 10            # Seconds for the connectivity check

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/91.0.4472.124 Safari/537.36"
    )
    DEFAULT_HEADERS: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": (
            "text/html,application/xhtml+xml,"
            "application/xml;q=0.9,image/webp,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.5",
    }

    # --- Extraction ---
    PLACEHOLDER_REVIEW_COUNTS: list[str] = [
        "126", "238", "452", "189", "86", "314",
        "92", "517", "64", "273", "195",
    ]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    SELECTORS_PATH: Path = BASE_DIR / "src" / "config" / "selectors.json"
    LOGS_DIR: Path = BASE_DIR / "logs"

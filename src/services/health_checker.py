# src/services/health_checker.py

"""Store connectivity health checker."""

import asyncio
import logging
import time
from dataclasses import dataclass

from src.config.settings import Settings
from src.scrapers.page_fetcher import PageFetcher

logger = logging.getLogger("quickfind.health")

_SLOW_THRESHOLD_MS = 5000


@dataclass
class HealthResult:
    """Result of a single store health check."""

    store_id: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def probe_store(fetcher: PageFetcher | None = None) -> HealthResult:
    """Fetch the store homepage and grade its connectivity."""
    settings = Settings()
    fetcher = fetcher or PageFetcher()

    start = time.monotonic()
    fetched = fetcher.fetch(
        settings.HOMEPAGE_URL, timeout=settings.HEALTH_TIMEOUT
    )
    elapsed_ms = (time.monotonic() - start) * 1000

    if not fetched.ok:
        return HealthResult(
            store_id=settings.STORE_ID,
            status="down",
            latency_ms=elapsed_ms,
            message=fetched.error[:80],
        )

    if elapsed_ms > _SLOW_THRESHOLD_MS:
        return HealthResult(
            store_id=settings.STORE_ID,
            status="slow",
            latency_ms=elapsed_ms,
            message="High latency",
        )

    return HealthResult(
        store_id=settings.STORE_ID,
        status="ok",
        latency_ms=elapsed_ms,
        message="",
    )


class HealthChecker:
    """Runs the store check off the event loop."""

    def __init__(self, fetcher: PageFetcher | None = None) -> None:
        self.fetcher = fetcher

    async def check(self) -> HealthResult:
        """Check the configured store and log the outcome."""
        result = await asyncio.to_thread(probe_store, self.fetcher)
        logger.info(
            "Health check %s: %s (%.0fms) %s",
            result.store_id,
            result.status,
            result.latency_ms,
            result.message,
        )
        return result

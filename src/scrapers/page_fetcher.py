# src/scrapers/page_fetcher.py

"""Single-shot page fetcher with browser-like request headers."""

import logging
from dataclasses import dataclass

from curl_cffi import requests as curl_requests

from src.config.settings import Settings


@dataclass
class FetchResult:
    """Outcome of one GET: the page body, or the reason it is missing."""

    url: str
    status_code: int = 0
    text: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        """True when the page arrived with a 2xx status."""
        return not self.error and 200 <= self.status_code < 300


class PageFetcher:
    """Fetches store pages with one GET each, no retries.

    Transport failures and error statuses are reported on the returned
    :class:`FetchResult` rather than raised, so callers can decide
    whether to substitute fallback data.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger("quickfind.fetcher")
        self.settings = Settings()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def fetch(self, url: str, timeout: int | None = None) -> FetchResult:
        """GET *url* and return the body or the error that prevented it.

        *timeout* overrides the configured request timeout for this call.
        """
        try:
            resp = self.session.get(
                url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=timeout or self._request_timeout,
            )
        except Exception as exc:
            self.logger.warning(
                "Error visiting %s: %s", url, exc, exc_info=True
            )
            return FetchResult(url=url, error=str(exc))

        result = FetchResult(
            url=url,
            status_code=resp.status_code,
            text=resp.text,
        )
        if not result.ok:
            result.error = f"HTTP {resp.status_code}"
            self.logger.warning(
                "Scraping error for %s: %s", url, result.error
            )
            return result

        self.logger.info("Visited: %s", url)
        return result

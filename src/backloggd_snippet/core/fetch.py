# ABOUTME: HTTP GET capability used by the pipeline for review and game pages
# ABOUTME: httpx-backed fetcher that follows redirects and reports the resolved URL

from typing import Protocol

import httpx

from backloggd_snippet.config import get_config
from backloggd_snippet.core.models import FetchedPage
from backloggd_snippet.utils.logging import get_logger, log_api_call


class FetchError(Exception):
    """Raised when a page cannot be fetched (transport error or non-2xx status)."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")


class PageFetcher(Protocol):
    """Protocol for fetching a page's HTML by URL."""

    async def fetch(self, url: str) -> FetchedPage:
        """Fetch url and return the resolved URL, status and body text.

        Raises:
            FetchError: If the request fails or returns a non-2xx status
        """
        ...


class HttpPageFetcher:
    """PageFetcher backed by an httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        config = get_config()
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": config.user_agent},
            timeout=config.request_timeout,
        )
        self.logger = get_logger(__name__)

    @log_api_call("backloggd")
    async def fetch(self, url: str) -> FetchedPage:
        try:
            response = await self.http_client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise FetchError(url, f"{type(e).__name__}: {e}") from e

        final_url = str(response.url)
        if final_url != url:
            self.logger.debug("Followed redirects", requested_url=url, final_url=final_url)

        return FetchedPage(url=final_url, status_code=response.status_code, text=response.text)

    async def close(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

"""
Page Fetcher - Retrieve raw HTML for the site extractors.

Handles:
- HTTP GET with browser-like headers
- A stricter header profile for social platforms that block bots
- Translating aiohttp failures into scrape errors the API can map to status codes

One request per call: no retries, no caching, no request coalescing.
"""

import asyncio
import logging
from dataclasses import dataclass, field

import aiohttp

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

FETCH_TIMEOUT_SECONDS = 30


class ScrapeError(Exception):
    """Base class for failures while fetching a page."""
    pass


class FetchTimeoutError(ScrapeError):
    """The upstream site did not answer in time."""
    pass


class FetchConnectionError(ScrapeError):
    """DNS, connection or protocol failure before a response was read."""
    pass


class UpstreamHTTPError(ScrapeError):
    """The upstream site answered with a non-2xx status."""

    def __init__(self, status: int, url: str, message: str = ""):
        self.status = status
        self.url = url
        super().__init__(message or f"HTTP {status} fetching {url}")


@dataclass(frozen=True)
class FetchProfile:
    """Header set and redirect policy for a request."""
    headers: dict[str, str] = field(default_factory=dict)
    timeout: int = FETCH_TIMEOUT_SECONDS
    max_redirects: int = 10


BROWSER_PROFILE = FetchProfile(headers={"User-Agent": USER_AGENT})

# TikTok, Instagram and X reject requests that don't look like a browser
SOCIAL_PROFILE = FetchProfile(
    headers={
        "User-Agent": USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Referer": "https://www.google.com/",
    },
    max_redirects=5,
)


class PageFetcher:
    """Fetches HTML over HTTP with aiohttp."""

    async def fetch(self, url: str, profile: FetchProfile = BROWSER_PROFILE) -> str:
        """
        GET a page and return its body as text.

        Raises:
            FetchTimeoutError: If the request exceeds the profile timeout
            UpstreamHTTPError: If the response status is not 2xx
            FetchConnectionError: For any other transport failure
        """
        logger.debug(f"Fetching {url}")
        try:
            async with aiohttp.ClientSession(headers=profile.headers) as session:
                async with session.get(
                    url,
                    timeout=aiohttp.ClientTimeout(total=profile.timeout),
                    allow_redirects=True,
                    max_redirects=profile.max_redirects,
                ) as resp:
                    if not 200 <= resp.status < 300:
                        raise UpstreamHTTPError(resp.status, url)
                    return await resp.text()
        except asyncio.TimeoutError as e:
            raise FetchTimeoutError(f"Timed out after {profile.timeout}s fetching {url}") from e
        except aiohttp.ClientResponseError as e:
            # Raised for redirect loops and other response-level failures
            raise UpstreamHTTPError(e.status, url, str(e)) from e
        except aiohttp.ClientError as e:
            raise FetchConnectionError(f"Failed to fetch {url}: {e}") from e

"""
HTTP exception utilities for common error patterns.

Maps scrape failures onto the small set of status codes the API exposes, and
provides helpers to reduce boilerplate for 404s.
"""

from typing import TypeVar

from fastapi import HTTPException

from .fetcher import FetchTimeoutError, UpstreamHTTPError

T = TypeVar("T")

RATE_LIMITED_DETAIL = (
    "This site is rate limiting requests. Try again later, or use a platform "
    "that allows scraping such as a blog, Medium, Substack or GitHub."
)

# Upstream statuses passed through to the client as-is
_PASSTHROUGH_STATUSES = {
    404: "Page not found",
    403: "Access forbidden",
    429: RATE_LIMITED_DETAIL,
}


def scrape_error_status(error: Exception) -> tuple[int, str]:
    """
    Map a scrape failure to (status_code, detail).

    Timeouts become 408; upstream 404, 403 and 429 pass through;
    everything else is a generic 500.
    """
    if isinstance(error, FetchTimeoutError):
        return 408, "Request timeout"
    if isinstance(error, UpstreamHTTPError) and error.status in _PASSTHROUGH_STATUSES:
        return error.status, _PASSTHROUGH_STATUSES[error.status]
    return 500, "Failed to scrape content"


def scrape_http_exception(error: Exception) -> HTTPException:
    status_code, detail = scrape_error_status(error)
    return HTTPException(status_code=status_code, detail=detail)


def require_resource(resource: T | None, detail: str = "Resource not found") -> T:
    """
    Raise 404 if resource is None, otherwise return the resource.

    Usage:
        coin = require_resource(storage.get_coin(id), "Coin not found")
    """
    if resource is None:
        raise HTTPException(status_code=404, detail=detail)
    return resource


def require_coin(coin: T | None) -> T:
    """Raise 404 if coin is None."""
    return require_resource(coin, "Coin not found")


def require_content(content: T | None) -> T:
    """Raise 404 if scraped content is None."""
    return require_resource(content, "Scraped content not found")

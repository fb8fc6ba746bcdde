"""
Scrape routes: classify URLs, scrape them, and read back stored results.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ..config import config, get_fetcher, get_storage
from ..exceptions import require_content, scrape_http_exception
from ..fetcher import PageFetcher
from ..platform_detector import SUPPORTED_PLATFORMS, detect_platform
from ..schemas import (
    ClassifyRequest,
    PlatformResponse,
    ScrapedContentResponse,
    ScrapeRequest,
    SupportedPlatformResponse,
)
from ..site_extractors import scrape_by_platform
from ..storage import MemStorage
from ..url_validator import validate_url_or_raise_http

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scrape"])


# ─────────────────────────────────────────────────────────────
# Scrape
# ─────────────────────────────────────────────────────────────

@router.post("/scrape")
async def scrape(
    request: ScrapeRequest,
    storage: Annotated[MemStorage, Depends(get_storage)],
    fetcher: Annotated[PageFetcher, Depends(get_fetcher)],
) -> ScrapedContentResponse:
    """Scrape a URL with its platform's extractor and store the result."""
    if not request.url:
        raise HTTPException(status_code=400, detail="URL is required")

    url = validate_url_or_raise_http(request.url, resolve_dns=config.RESOLVE_DNS)
    platform = detect_platform(url)

    try:
        data = await scrape_by_platform(url, platform.type, fetcher)
    except Exception as e:
        logger.error(f"Scraping {url} as {platform.name} failed: {e}")
        raise scrape_http_exception(e)

    stored = storage.create_scraped_content(data)
    return ScrapedContentResponse.from_db(stored)


@router.post("/classify")
async def classify(request: ClassifyRequest) -> PlatformResponse:
    """Detect which platform a URL belongs to without fetching it."""
    return PlatformResponse.from_info(detect_platform(request.url))


@router.get("/platforms")
async def list_platforms() -> list[SupportedPlatformResponse]:
    """List the platforms with dedicated extractors."""
    return [
        SupportedPlatformResponse(type=platform, name=name, example=example)
        for platform, name, example in SUPPORTED_PLATFORMS
    ]


# ─────────────────────────────────────────────────────────────
# Stored content
# ─────────────────────────────────────────────────────────────

@router.get("/scraped")
async def list_scraped_content(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[ScrapedContentResponse]:
    """List stored scrape results, newest first."""
    return [ScrapedContentResponse.from_db(c) for c in storage.get_all_scraped_content()]


@router.get("/scraped/{content_id}")
async def get_scraped_content(
    content_id: str,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> ScrapedContentResponse:
    """Get a stored scrape result."""
    item = require_content(storage.get_scraped_content(content_id))
    return ScrapedContentResponse.from_db(item)

"""
Scrape entry point: classify a URL, then dispatch it to its platform extractor.
"""

from .fetcher import PageFetcher
from .platform_detector import detect_platform
from .site_extractors import ScrapedData, scrape_by_platform


async def scrape_url(url: str, fetcher: PageFetcher | None = None) -> ScrapedData:
    """Scrape a URL using the extractor for its detected platform."""
    platform = detect_platform(url)
    return await scrape_by_platform(url, platform.type, fetcher)

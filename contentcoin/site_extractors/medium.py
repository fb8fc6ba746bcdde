"""
Medium.com article extractor.
"""

from bs4 import BeautifulSoup

from ..platform_detector import PlatformType
from .base import SiteExtractor, first_attr, first_text, meta_name, meta_property


class MediumExtractor(SiteExtractor):
    """Extractor for Medium.com articles."""

    PLATFORM = PlatformType.MEDIUM
    DEFAULT_TITLE = "Medium Article"

    TITLE_SOURCES = (meta_property("og:title"), first_text("h1"))
    AUTHOR_SOURCES = (
        meta_name("author"),
        meta_property("author"),
        first_text('a[data-testid="authorName"]'),
    )
    DATE_SOURCES = (
        meta_property("article:published_time"),
        first_attr("time[datetime]", "datetime"),
    )
    CONTENT_SELECTORS = ("article", "main")
    NOISE_SELECTORS = SiteExtractor.NOISE_SELECTORS + (
        '[data-testid="headerSocialShare"]', '[data-testid="responses"]',
    )

    def extract_tags(self, soup: BeautifulSoup) -> list[str]:
        tags = []
        for meta in soup.find_all("meta", attrs={"property": "article:tag"}):
            if tag := (meta.get("content") or "").strip():
                tags.append(tag)
        return tags

"""
Generic blog/article extractor, used for any URL without a dedicated platform.
"""

from bs4 import BeautifulSoup

from ..platform_detector import PlatformType
from .base import (
    SiteExtractor,
    all_text,
    element_text,
    first_attr,
    first_text,
    meta_name,
    meta_property,
    strip_noise,
)

# Content must exceed this many characters for a container to be trusted
MIN_CONTAINER_LENGTH = 100


class BlogExtractor(SiteExtractor):
    """Extractor for personal blogs, news sites and anything else."""

    PLATFORM = PlatformType.BLOG
    DEFAULT_TITLE = "Web Content"

    TITLE_SOURCES = (first_text("title"), meta_property("og:title"), first_text("h1"))
    DESCRIPTION_SOURCES = (meta_name("description"), meta_property("og:description"))
    AUTHOR_SOURCES = (
        meta_name("author"),
        meta_property("article:author"),
        first_text('[rel="author"]'),
    )
    DATE_SOURCES = (
        meta_property("article:published_time"),
        meta_name("publishdate"),
        first_attr("time[datetime]", "datetime"),
    )
    IMAGE_SOURCES = (
        meta_property("og:image"),
        meta_name("twitter:image"),
        first_attr("img[src]", "src"),
    )
    CONTENT_SELECTORS = (
        "article",
        '[role="main"]',
        ".post-content",
        ".entry-content",
        ".content",
        ".article-body",
        ".story-body",
        ".post-body",
        "main",
        ".main-content",
    )

    def extract_tags(self, soup: BeautifulSoup) -> list[str]:
        keywords = meta_name("keywords")(soup) or ""
        return [k.strip() for k in keywords.split(",") if k.strip()]

    def extract_content(self, soup: BeautifulSoup, description: str) -> str:
        """
        Walk the candidate containers in priority order.

        A selector only wins if the joined text of all its matches is longer
        than MIN_CONTAINER_LENGTH, so a near-empty <article> wrapper doesn't
        hide the real body text.
        Falls back to the whole <body>.
        """
        strip_noise(soup, self.NOISE_SELECTORS)
        for selector in self.CONTENT_SELECTORS:
            text = all_text(soup, selector)
            if len(text) > MIN_CONTAINER_LENGTH:
                return text
        return element_text(soup.body or soup)

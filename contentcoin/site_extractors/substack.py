"""
Substack newsletter post extractor.
"""

from ..platform_detector import PlatformType
from .base import SiteExtractor, first_attr, first_text, meta_name, meta_property


class SubstackExtractor(SiteExtractor):
    """Extractor for Substack posts."""

    PLATFORM = PlatformType.SUBSTACK
    DEFAULT_TITLE = "Substack Post"

    TITLE_SOURCES = (
        meta_property("og:title"),
        first_text("h1.post-title"),
        first_text("h1"),
    )
    AUTHOR_SOURCES = (meta_name("author"), first_text(".author-name"))
    DATE_SOURCES = (
        first_attr("time[datetime]", "datetime"),
        meta_property("article:published_time"),
    )
    # Substack wraps the post in .body
    CONTENT_SELECTORS = (".body", ".post-content", "article")
    NOISE_SELECTORS = SiteExtractor.NOISE_SELECTORS + (
        ".subscribe-widget", ".subscription-widget", ".post-ufi", ".share-dialog",
    )

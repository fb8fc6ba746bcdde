"""
YouTube channel and video extractor.
"""

from ..platform_detector import PlatformType
from .base import SiteExtractor, first_attr, meta_name, meta_property


class YouTubeExtractor(SiteExtractor):
    """Extractor for YouTube videos and channels."""

    PLATFORM = PlatformType.YOUTUBE
    DEFAULT_TITLE = "YouTube Content"

    TITLE_SOURCES = (meta_property("og:title"), meta_name("title"))
    DESCRIPTION_SOURCES = (meta_property("og:description"), meta_name("description"))
    AUTHOR_SOURCES = (
        first_attr('link[itemprop="name"]', "content"),
        first_attr('meta[itemprop="author"]', "content"),
    )
    DATE_SOURCES = (first_attr('meta[itemprop="datePublished"]', "content"),)
    IMAGE_SOURCES = (meta_property("og:image"),)

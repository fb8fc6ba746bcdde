"""
Twitch channel extractor.
"""

from ..platform_detector import PlatformType
from .base import SiteExtractor, meta_property


class TwitchExtractor(SiteExtractor):
    """Extractor for Twitch channels."""

    PLATFORM = PlatformType.TWITCH
    DEFAULT_TITLE = "Twitch Channel"

    AUTHOR_SOURCES = (meta_property("og:site_name"),)
    CONTENT_SELECTORS = (".channel-info-content", "main", "body")

"""
Farcaster (Warpcast) profile and channel extractor.
"""

from ..platform_detector import PlatformType
from .base import SiteExtractor, meta_property


class FarcasterExtractor(SiteExtractor):
    """Extractor for Warpcast profiles, casts and channels."""

    PLATFORM = PlatformType.FARCASTER
    DEFAULT_TITLE = "Farcaster Channel"

    AUTHOR_SOURCES = (meta_property("profile:username"),)
    CONTENT_SELECTORS = ("main", ".profile", "body")

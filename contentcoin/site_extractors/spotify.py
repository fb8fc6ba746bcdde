"""
Spotify track, album, artist and playlist extractor.
"""

from ..platform_detector import PlatformType
from .base import SiteExtractor, meta_name, meta_property


class SpotifyExtractor(SiteExtractor):
    """Extractor for Spotify pages, which only expose Open Graph metadata."""

    PLATFORM = PlatformType.SPOTIFY
    DEFAULT_TITLE = "Spotify Content"

    TITLE_SOURCES = (meta_property("og:title"),)
    AUTHOR_SOURCES = (meta_name("music:musician"), meta_property("music:musician"))
    DATE_SOURCES = (meta_name("music:release_date"),)

"""
Gitcoin grant extractor.
"""

from ..platform_detector import PlatformType
from .base import SiteExtractor


class GitcoinExtractor(SiteExtractor):
    """Extractor for Gitcoin grant pages."""

    PLATFORM = PlatformType.GITCOIN
    DEFAULT_TITLE = "Gitcoin Grant"
    CONTENT_SELECTORS = (".grant-description", "main")

"""
Giveth project extractor.
"""

from ..platform_detector import PlatformType
from .base import SiteExtractor


class GivethExtractor(SiteExtractor):
    """Extractor for Giveth donation projects."""

    PLATFORM = PlatformType.GIVETH
    DEFAULT_TITLE = "Giveth Project"
    CONTENT_SELECTORS = (".project-description", "main")

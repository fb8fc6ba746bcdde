"""
Twitter/X profile and post extractor.
"""

import re

from ..platform_detector import PlatformType
from .social import SocialExtractor


class TwitterExtractor(SocialExtractor):
    """Extractor for Twitter/X. Most data is only available in meta tags."""

    PLATFORM = PlatformType.TWITTER
    DEFAULT_TITLE = "Twitter/X Post"
    LABEL = "Twitter/X"
    USERNAME_PATTERN = re.compile(r"(?:twitter\.com|x\.com)/([^/?#]+)")

"""
Instagram profile and post extractor.
"""

import re

from ..platform_detector import PlatformType
from .social import SocialExtractor


class InstagramExtractor(SocialExtractor):
    PLATFORM = PlatformType.INSTAGRAM
    DEFAULT_TITLE = "Instagram Post"
    LABEL = "Instagram"
    USERNAME_PATTERN = re.compile(r"instagram\.com/([^/?#]+)")

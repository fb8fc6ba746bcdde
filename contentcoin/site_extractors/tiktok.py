"""
TikTok video and profile extractor.
"""

import re

from ..platform_detector import PlatformType
from .social import SocialExtractor


class TikTokExtractor(SocialExtractor):
    PLATFORM = PlatformType.TIKTOK
    DEFAULT_TITLE = "TikTok Video"
    LABEL = "TikTok"
    USERNAME_PATTERN = re.compile(r"tiktok\.com/@([^/?#]+)")

"""
Platform Extractors - Per-platform scraping rules.

One extractor per supported platform:
- YouTube, Spotify: Open Graph metadata only
- Medium, Substack, Gitcoin, Giveth, GitHub, Farcaster, Twitch: metadata plus body text
- TikTok, Instagram, Twitter/X: metadata, with a placeholder result when rate limited
- Blog: generic fallback with a length-gated content container cascade

The dispatcher routes a classified URL to exactly one extractor.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from ..fetcher import PageFetcher
from ..platform_detector import PlatformType
from .base import MAX_CONTENT_LENGTH, ScrapedData, SiteExtractor
from .farcaster import FarcasterExtractor
from .generic import BlogExtractor
from .gitcoin import GitcoinExtractor
from .github import GitHubExtractor
from .giveth import GivethExtractor
from .instagram import InstagramExtractor
from .medium import MediumExtractor
from .spotify import SpotifyExtractor
from .substack import SubstackExtractor
from .tiktok import TikTokExtractor
from .twitch import TwitchExtractor
from .twitter import TwitterExtractor
from .youtube import YouTubeExtractor

logger = logging.getLogger(__name__)

# Read-only routing table, one extractor per platform
PLATFORM_EXTRACTORS: Mapping[PlatformType, type[SiteExtractor]] = MappingProxyType({
    PlatformType.YOUTUBE: YouTubeExtractor,
    PlatformType.SPOTIFY: SpotifyExtractor,
    PlatformType.MEDIUM: MediumExtractor,
    PlatformType.SUBSTACK: SubstackExtractor,
    PlatformType.GITCOIN: GitcoinExtractor,
    PlatformType.GIVETH: GivethExtractor,
    PlatformType.TIKTOK: TikTokExtractor,
    PlatformType.INSTAGRAM: InstagramExtractor,
    PlatformType.TWITTER: TwitterExtractor,
    PlatformType.GITHUB: GitHubExtractor,
    PlatformType.FARCASTER: FarcasterExtractor,
    PlatformType.TWITCH: TwitchExtractor,
    PlatformType.BLOG: BlogExtractor,
})


def get_extractor_for_platform(
    platform: PlatformType | str,
    fetcher: PageFetcher | None = None,
) -> SiteExtractor:
    """Get the extractor for a platform tag. Unknown tags get the blog extractor."""
    try:
        extractor_class = PLATFORM_EXTRACTORS[PlatformType(platform)]
    except ValueError:
        extractor_class = BlogExtractor
    return extractor_class(fetcher=fetcher)


async def scrape_by_platform(
    url: str,
    platform: PlatformType | str,
    fetcher: PageFetcher | None = None,
) -> ScrapedData:
    """
    Scrape a URL with the extractor for its platform.

    Errors raised by the extractor propagate unchanged.
    """
    extractor = get_extractor_for_platform(platform, fetcher)
    logger.info(f"Scraping {url} with {type(extractor).__name__}")
    return await extractor.extract(url)


__all__ = [
    "MAX_CONTENT_LENGTH",
    "PLATFORM_EXTRACTORS",
    "ScrapedData",
    "SiteExtractor",
    "get_extractor_for_platform",
    "scrape_by_platform",
    "BlogExtractor",
    "FarcasterExtractor",
    "GitcoinExtractor",
    "GitHubExtractor",
    "GivethExtractor",
    "InstagramExtractor",
    "MediumExtractor",
    "SpotifyExtractor",
    "SubstackExtractor",
    "TikTokExtractor",
    "TwitchExtractor",
    "TwitterExtractor",
    "YouTubeExtractor",
]

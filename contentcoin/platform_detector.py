"""
Platform Detector - Classify a URL into one of the supported content platforms.

Classification is a pure function of the URL's hostname and path. Every URL
maps to exactly one platform; anything unrecognised (or unparseable) is a
generic blog/article.
"""

import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse


class PlatformType(str, Enum):
    """Closed set of content platforms."""
    YOUTUBE = "youtube"
    SPOTIFY = "spotify"
    MEDIUM = "medium"
    SUBSTACK = "substack"
    GITCOIN = "gitcoin"
    GIVETH = "giveth"
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"
    GITHUB = "github"
    FARCASTER = "farcaster"
    TWITCH = "twitch"
    BLOG = "blog"


@dataclass(frozen=True)
class PlatformInfo:
    """Result of classifying a URL."""
    type: PlatformType
    name: str
    id: str | None = None


BLOG_FALLBACK = PlatformInfo(PlatformType.BLOG, "Blog/Article")

_YOUTUBE_CHANNEL = re.compile(r"/(channel|c|user)/([^/]+)|/@([^/]+)")
_SPOTIFY_ITEM = re.compile(r"/(track|album|artist|playlist)/([^/?]+)")

# (platform, display name, hostname substrings, exact hostnames)
_HOST_RULES: list[tuple[PlatformType, str, tuple[str, ...], tuple[str, ...]]] = [
    (PlatformType.MEDIUM, "Medium", ("medium.com",), ()),
    (PlatformType.SUBSTACK, "Substack", ("substack.com",), ()),
    (PlatformType.GITCOIN, "Gitcoin", ("gitcoin.co",), ()),
    (PlatformType.GIVETH, "Giveth", ("giveth.io",), ()),
    (PlatformType.TIKTOK, "TikTok", ("tiktok.com",), ()),
    (PlatformType.INSTAGRAM, "Instagram", ("instagram.com",), ()),
    (PlatformType.TWITTER, "Twitter/X", ("twitter.com",), ("x.com",)),
    (PlatformType.GITHUB, "GitHub", ("github.com",), ()),
    (PlatformType.FARCASTER, "Farcaster", ("warpcast.com", "farcaster.xyz"), ()),
    (PlatformType.TWITCH, "Twitch", ("twitch.tv",), ()),
]

SUPPORTED_PLATFORMS: tuple[tuple[PlatformType, str, str], ...] = (
    (PlatformType.YOUTUBE, "YouTube", "https://youtube.com/@channelname"),
    (PlatformType.SPOTIFY, "Spotify", "https://open.spotify.com/track/..."),
    (PlatformType.MEDIUM, "Medium", "https://medium.com/@author/article"),
    (PlatformType.SUBSTACK, "Substack", "https://example.substack.com/p/article"),
    (PlatformType.GITCOIN, "Gitcoin Grants", "https://grants.gitcoin.co/..."),
    (PlatformType.GIVETH, "Giveth", "https://giveth.io/project/..."),
    (PlatformType.TIKTOK, "TikTok", "https://tiktok.com/@username"),
    (PlatformType.INSTAGRAM, "Instagram", "https://instagram.com/username"),
    (PlatformType.TWITTER, "Twitter/X", "https://twitter.com/username"),
    (PlatformType.GITHUB, "GitHub", "https://github.com/username/project"),
    (PlatformType.FARCASTER, "Farcaster", "https://warpcast.com/username"),
    (PlatformType.TWITCH, "Twitch", "https://twitch.tv/username"),
    (PlatformType.BLOG, "Personal Blogs & News", "https://example.com/article"),
)


def _match_id(pattern: re.Pattern, path: str) -> str | None:
    match = pattern.search(path)
    if not match:
        return None
    # Last non-empty group holds the identifier
    return next((g for g in reversed(match.groups()) if g), None)


def detect_platform(url: str) -> PlatformInfo:
    """
    Classify a URL into a platform.

    Never raises: a string that doesn't parse to an absolute URL is
    classified as a blog.
    """
    try:
        parsed = urlparse(url)
        hostname = (parsed.hostname or "").lower()
    except (ValueError, TypeError, AttributeError):
        return BLOG_FALLBACK

    if not parsed.scheme or not hostname:
        return BLOG_FALLBACK

    path = parsed.path

    if "youtube.com" in hostname or hostname == "youtu.be":
        return PlatformInfo(PlatformType.YOUTUBE, "YouTube", _match_id(_YOUTUBE_CHANNEL, path))

    if "spotify.com" in hostname:
        return PlatformInfo(PlatformType.SPOTIFY, "Spotify", _match_id(_SPOTIFY_ITEM, path))

    for platform, name, substrings, exact_hosts in _HOST_RULES:
        if hostname in exact_hosts or any(s in hostname for s in substrings):
            return PlatformInfo(platform, name)

    return BLOG_FALLBACK

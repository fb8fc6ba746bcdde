"""
Shared behavior for social platforms that rate-limit scrapers.

TikTok, Instagram and X answer most anonymous requests with HTTP 429. Rather
than failing the scrape, these extractors fall back to a reduced record built
from the username in the URL.
"""

import logging
import re

from ..fetcher import SOCIAL_PROFILE, UpstreamHTTPError
from .base import ScrapedData, SiteExtractor, meta_name, meta_property

logger = logging.getLogger(__name__)

RATE_LIMITED_STATUS = 429


class SocialExtractor(SiteExtractor):
    """Base for social profile/post extractors with a rate-limit fallback."""

    FETCH_PROFILE = SOCIAL_PROFILE

    # Display label used in fallback titles, e.g. "Instagram - @user"
    LABEL: str = ""
    USERNAME_PATTERN: re.Pattern = re.compile(r"$^")

    TITLE_SOURCES = (meta_property("og:title"), meta_name("twitter:title"))
    DESCRIPTION_SOURCES = (
        meta_property("og:description"),
        meta_name("twitter:description"),
        meta_name("description"),
    )
    IMAGE_SOURCES = (meta_property("og:image"), meta_name("twitter:image"))

    def username_from_url(self, url: str) -> str:
        match = self.USERNAME_PATTERN.search(url)
        return match.group(1) if match else "user"

    def default_author(self, url: str) -> str:
        return self.username_from_url(url)

    async def extract(self, url: str) -> ScrapedData:
        try:
            return await super().extract(url)
        except UpstreamHTTPError as e:
            if e.status != RATE_LIMITED_STATUS:
                raise
            logger.warning(f"{self.LABEL} rate limited {url}, returning profile placeholder")
            return self.rate_limited_result(url)

    def rate_limited_result(self, url: str) -> ScrapedData:
        """Placeholder record built only from the URL."""
        username = self.username_from_url(url)
        return ScrapedData(
            url=url,
            platform=self.PLATFORM,
            title=f"{self.LABEL} - @{username}",
            description=(
                f"{self.LABEL} profile for @{username} "
                f"(rate limited, limited data available)"
            ),
            author=username,
            content=f"Profile for @{username}",
        )

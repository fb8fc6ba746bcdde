"""
Base classes and selector helpers for platform extractors.

Each extractor is mostly declarative: for every field it lists ordered
candidate sources, tried left to right until one yields a non-empty value,
then a platform default. Special cases (rate-limit fallbacks, URL parsing)
are handled by overriding methods on the subclass.
"""

import logging
import re
from abc import ABC
from dataclasses import asdict, dataclass, field
from typing import Callable, Sequence

from bs4 import BeautifulSoup, Tag

from ..fetcher import BROWSER_PROFILE, FetchProfile, PageFetcher
from ..platform_detector import PlatformType

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 10_000

# Elements that never carry article text
NOISE_SELECTORS: tuple[str, ...] = ("script", "style", "nav", "footer", "header")

# Layout clutter common to blogs and publishing platforms
CLUTTER_SELECTORS: tuple[str, ...] = (
    ".sidebar", ".comments", ".social-share", ".advertisement", ".ad",
)

Candidate = Callable[[BeautifulSoup], str | None]


@dataclass
class ScrapedData:
    """Canonical scrape result handed to storage."""
    url: str
    platform: PlatformType
    title: str
    description: str = ""
    author: str = ""
    publish_date: str = ""
    image: str = ""
    content: str = ""  # Plain text, at most MAX_CONTENT_LENGTH chars
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["platform"] = self.platform.value
        return data


# ─────────────────────────────────────────────────────────────
# Candidate sources
# ─────────────────────────────────────────────────────────────

def meta_property(prop: str) -> Candidate:
    """<meta property="..." content="...">"""
    def candidate(soup: BeautifulSoup) -> str | None:
        tag = soup.find("meta", attrs={"property": prop})
        return tag.get("content") if tag else None
    return candidate


def meta_name(name: str) -> Candidate:
    """<meta name="..." content="...">"""
    def candidate(soup: BeautifulSoup) -> str | None:
        tag = soup.find("meta", attrs={"name": name})
        return tag.get("content") if tag else None
    return candidate


def first_attr(selector: str, attr: str) -> Candidate:
    """Attribute of the first element matching a CSS selector."""
    def candidate(soup: BeautifulSoup) -> str | None:
        elem = soup.select_one(selector)
        value = elem.get(attr) if elem else None
        return value if isinstance(value, str) else None
    return candidate


def first_text(selector: str) -> Candidate:
    """Visible text of the first element matching a CSS selector."""
    def candidate(soup: BeautifulSoup) -> str | None:
        elem = soup.select_one(selector)
        return elem.get_text(" ", strip=True) if elem else None
    return candidate


def first_match(soup: BeautifulSoup, candidates: Sequence[Candidate], default: str = "") -> str:
    """Return the first non-empty candidate value, else the default."""
    for candidate in candidates:
        value = candidate(soup)
        if value and value.strip():
            return value.strip()
    return default


# ─────────────────────────────────────────────────────────────
# Text helpers
# ─────────────────────────────────────────────────────────────

def clean_text(text: str) -> str:
    """Collapse runs of whitespace to single spaces."""
    return re.sub(r"\s+", " ", text).strip()


def truncate(text: str, limit: int = MAX_CONTENT_LENGTH) -> str:
    return text[:limit]


def strip_noise(root: Tag, selectors: Sequence[str]) -> None:
    """Remove noise elements in place."""
    for selector in selectors:
        for elem in root.select(selector):
            elem.decompose()


def element_text(elem: Tag | None) -> str:
    if elem is None:
        return ""
    return clean_text(elem.get_text(" ", strip=True))


def all_text(root: Tag, selector: str) -> str:
    """Joined text of every element matching a CSS selector."""
    texts = (element_text(elem) for elem in root.select(selector))
    return " ".join(t for t in texts if t)


class SiteExtractor(ABC):
    """Base class for platform extractors."""

    PLATFORM: PlatformType = PlatformType.BLOG
    DEFAULT_TITLE: str = "Web Content"
    FETCH_PROFILE: FetchProfile = BROWSER_PROFILE

    TITLE_SOURCES: tuple[Candidate, ...] = (meta_property("og:title"), first_text("h1"))
    DESCRIPTION_SOURCES: tuple[Candidate, ...] = (meta_property("og:description"),)
    AUTHOR_SOURCES: tuple[Candidate, ...] = ()
    DATE_SOURCES: tuple[Candidate, ...] = ()
    IMAGE_SOURCES: tuple[Candidate, ...] = (meta_property("og:image"),)

    # Ordered content containers. Empty means the page has no article body
    # and the description doubles as content.
    CONTENT_SELECTORS: tuple[str, ...] = ()
    NOISE_SELECTORS: tuple[str, ...] = NOISE_SELECTORS + CLUTTER_SELECTORS

    def __init__(self, fetcher: PageFetcher | None = None):
        self.fetcher = fetcher or PageFetcher()

    async def extract(self, url: str) -> ScrapedData:
        """Fetch the page once and extract its fields."""
        html = await self.fetcher.fetch(url, self.FETCH_PROFILE)
        soup = BeautifulSoup(html, "html.parser")
        result = self.parse(url, soup)
        logger.debug(
            f"{self.PLATFORM.value} extractor: title={result.title!r}, "
            f"content={len(result.content)} chars"
        )
        return result

    def parse(self, url: str, soup: BeautifulSoup) -> ScrapedData:
        # Metadata first: noise stripping below removes <header>, which often holds the h1
        description = first_match(soup, self.DESCRIPTION_SOURCES)
        return ScrapedData(
            url=url,
            platform=self.PLATFORM,
            title=first_match(soup, self.TITLE_SOURCES, self.DEFAULT_TITLE),
            description=description,
            author=first_match(soup, self.AUTHOR_SOURCES, self.default_author(url)),
            publish_date=first_match(soup, self.DATE_SOURCES),
            image=first_match(soup, self.IMAGE_SOURCES),
            tags=self.extract_tags(soup),
            content=truncate(self.extract_content(soup, description)),
        )

    def default_author(self, url: str) -> str:
        return ""

    def extract_tags(self, soup: BeautifulSoup) -> list[str]:
        return []

    def extract_content(self, soup: BeautifulSoup, description: str) -> str:
        """Text of the first selector with any matching content, noise removed."""
        if not self.CONTENT_SELECTORS:
            return description

        strip_noise(soup, self.NOISE_SELECTORS)
        for selector in self.CONTENT_SELECTORS:
            if text := all_text(soup, selector):
                return text
        return ""

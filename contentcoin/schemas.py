"""
Pydantic models for API request/response validation.
"""

from typing import Any

from pydantic import BaseModel, Field

from .models import CoinStatus, StoredCoin, StoredContent
from .platform_detector import PlatformInfo, PlatformType


# ─────────────────────────────────────────────────────────────
# Scrape Schemas
# ─────────────────────────────────────────────────────────────

class ScrapeRequest(BaseModel):
    """Request to scrape a URL. Validated by the route so a bad URL gives 400, not 422."""
    url: Any = None


class ClassifyRequest(BaseModel):
    url: str


class PlatformResponse(BaseModel):
    """Platform a URL was classified as."""
    type: PlatformType
    name: str
    id: str | None = None

    @classmethod
    def from_info(cls, info: PlatformInfo) -> "PlatformResponse":
        return cls(type=info.type, name=info.name, id=info.id)


class SupportedPlatformResponse(BaseModel):
    type: PlatformType
    name: str
    example: str


class ScrapedContentResponse(BaseModel):
    """Stored scrape result."""
    id: str
    url: str
    platform: str
    title: str
    description: str | None
    author: str | None
    publish_date: str | None
    image: str | None
    content: str | None
    tags: list[str] | None
    scraped_at: str

    @classmethod
    def from_db(cls, item: StoredContent) -> "ScrapedContentResponse":
        return cls(
            id=item.id,
            url=item.url,
            platform=item.platform,
            title=item.title,
            description=item.description,
            author=item.author,
            publish_date=item.publish_date,
            image=item.image,
            content=item.content,
            tags=item.tags,
            scraped_at=item.scraped_at.isoformat(),
        )


# ─────────────────────────────────────────────────────────────
# Coin Schemas
# ─────────────────────────────────────────────────────────────

class CreateCoinRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    symbol: str = Field(min_length=1, max_length=20)
    creator: str = Field(min_length=1)
    status: CoinStatus = CoinStatus.PENDING
    address: str | None = None
    scraped_content_id: str | None = None
    ipfs_uri: str | None = None


class UpdateCoinRequest(BaseModel):
    address: str | None = None
    status: CoinStatus | None = None


class CoinResponse(BaseModel):
    id: str
    name: str
    symbol: str
    creator: str
    status: CoinStatus
    address: str | None
    scraped_content_id: str | None
    ipfs_uri: str | None
    created_at: str

    @classmethod
    def from_db(cls, coin: StoredCoin) -> "CoinResponse":
        return cls(
            id=coin.id,
            name=coin.name,
            symbol=coin.symbol,
            creator=coin.creator,
            status=coin.status,
            address=coin.address,
            scraped_content_id=coin.scraped_content_id,
            ipfs_uri=coin.ipfs_uri,
            created_at=coin.created_at.isoformat(),
        )

"""
Storage models - dataclasses for stored entities.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class CoinStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    FAILED = "failed"


@dataclass
class StoredContent:
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
    scraped_at: datetime


@dataclass
class StoredCoin:
    id: str
    name: str
    symbol: str
    creator: str  # Wallet address of the minter
    status: CoinStatus
    created_at: datetime
    address: str | None = None  # Contract address once deployed
    scraped_content_id: str | None = None
    ipfs_uri: str | None = None

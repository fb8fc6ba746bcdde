"""
In-memory storage for scraped content and coins.

Everything lives in dicts keyed by a generated UUID and is lost on restart.
All access happens on the event loop thread, so no locking is needed.
"""

import uuid
from datetime import datetime

from .models import CoinStatus, StoredCoin, StoredContent
from .site_extractors import ScrapedData


def _or_none(value):
    """Store empty strings and lists as None."""
    return value if value else None


class MemStorage:
    """Dict-backed storage."""

    def __init__(self):
        self._content: dict[str, StoredContent] = {}
        self._coins: dict[str, StoredCoin] = {}

    # ─────────────────────────────────────────────────────────────
    # Scraped content
    # ─────────────────────────────────────────────────────────────

    def create_scraped_content(self, data: ScrapedData) -> StoredContent:
        """Store a scrape result. Returns the stored record."""
        fields = {key: _or_none(value) for key, value in data.to_dict().items()}
        item = StoredContent(id=str(uuid.uuid4()), scraped_at=datetime.now(), **fields)
        self._content[item.id] = item
        return item

    def get_scraped_content(self, content_id: str) -> StoredContent | None:
        return self._content.get(content_id)

    def get_all_scraped_content(self) -> list[StoredContent]:
        """All scraped content, newest first."""
        return list(reversed(self._content.values()))

    # ─────────────────────────────────────────────────────────────
    # Coins
    # ─────────────────────────────────────────────────────────────

    def create_coin(
        self,
        name: str,
        symbol: str,
        creator: str,
        status: CoinStatus = CoinStatus.PENDING,
        address: str | None = None,
        scraped_content_id: str | None = None,
        ipfs_uri: str | None = None,
    ) -> StoredCoin:
        """Store a new coin record."""
        coin = StoredCoin(
            id=str(uuid.uuid4()),
            name=name,
            symbol=symbol,
            creator=creator,
            status=CoinStatus(status),
            created_at=datetime.now(),
            address=address,
            scraped_content_id=scraped_content_id,
            ipfs_uri=ipfs_uri,
        )
        self._coins[coin.id] = coin
        return coin

    def get_coin(self, coin_id: str) -> StoredCoin | None:
        return self._coins.get(coin_id)

    def get_coin_by_address(self, address: str) -> StoredCoin | None:
        """Find a coin by contract address (case-insensitive)."""
        address = address.lower()
        for coin in self._coins.values():
            if coin.address and coin.address.lower() == address:
                return coin
        return None

    def get_all_coins(self) -> list[StoredCoin]:
        """All coins, newest first."""
        return list(reversed(self._coins.values()))

    def get_coins_by_creator(self, creator: str) -> list[StoredCoin]:
        """Coins minted by a wallet (case-insensitive), newest first."""
        creator = creator.lower()
        return [c for c in self.get_all_coins() if c.creator.lower() == creator]

    def update_coin(
        self,
        coin_id: str,
        address: str | None = None,
        status: CoinStatus | None = None,
    ) -> StoredCoin | None:
        """Set a coin's contract address and/or status. Returns None if not found."""
        coin = self._coins.get(coin_id)
        if coin is None:
            return None
        if address is not None:
            coin.address = address
        if status is not None:
            coin.status = CoinStatus(status)
        return coin

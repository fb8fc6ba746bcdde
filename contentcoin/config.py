"""
Configuration and application state management.
"""

import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from fastapi import HTTPException

if TYPE_CHECKING:
    from .fetcher import PageFetcher
    from .storage import MemStorage

# Load environment variables
load_dotenv()


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse boolean from environment variable."""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


class Config:
    """Application configuration from environment."""
    PORT: int = int(os.getenv("PORT", "5000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Requests per minute per client IP; 0 disables limiting
    RATE_LIMIT_PER_MINUTE: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "60"))

    # Resolve hostnames before scraping to reject ones pointing at private networks
    RESOLVE_DNS: bool = _parse_bool(os.getenv("RESOLVE_DNS"), default=True)


config = Config()


class AppState:
    """Shared application state."""
    storage: "MemStorage | None" = None
    fetcher: "PageFetcher | None" = None


state = AppState()


def get_storage() -> "MemStorage":
    """Dependency to get the storage instance."""
    if state.storage is None:
        raise HTTPException(status_code=500, detail="Storage not initialized")
    return state.storage


def get_fetcher() -> "PageFetcher":
    """Dependency to get the page fetcher."""
    if state.fetcher is None:
        raise HTTPException(status_code=500, detail="Fetcher not initialized")
    return state.fetcher

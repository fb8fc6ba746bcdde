"""
Miscellaneous routes: health check and stats.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import get_storage
from ..storage import MemStorage

router = APIRouter(tags=["misc"])


@router.get("/status")
async def health_check() -> dict:
    """API health check."""
    return {"status": "ok", "version": __version__}


@router.get("/api/stats")
async def get_stats(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> dict:
    """Counts of stored content and coins."""
    by_platform: dict[str, int] = {}
    for item in storage.get_all_scraped_content():
        by_platform[item.platform] = by_platform.get(item.platform, 0) + 1

    return {
        "total_scraped": sum(by_platform.values()),
        "total_coins": len(storage.get_all_coins()),
        "by_platform": by_platform,
    }

"""
API route modules.
"""

from .scrape import router as scrape_router
from .coins import router as coins_router
from .misc import router as misc_router

__all__ = [
    "scrape_router",
    "coins_router",
    "misc_router",
]

"""
Content Coin API Server

FastAPI application providing endpoints for:
- Platform classification and scraping
- Stored scrape results
- Coin records backed by scraped content
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .config import config, state
from .fetcher import PageFetcher
from .rate_limit import setup_rate_limiting
from .routes import coins_router, misc_router, scrape_router
from .storage import MemStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application resources."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Skip if already initialized (e.g., by tests)
    if state.storage is None:
        state.storage = MemStorage()
    if state.fetcher is None:
        state.fetcher = PageFetcher()
    logger.info(f"Content Coin API {__version__} started")

    yield


app = FastAPI(
    title="Content Coin API",
    version=__version__,
    lifespan=lifespan
)

setup_rate_limiting(app)

# Include routers
app.include_router(misc_router)
app.include_router(scrape_router)
app.include_router(coins_router)


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("contentcoin.server:app", host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    main()

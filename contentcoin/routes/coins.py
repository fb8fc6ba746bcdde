"""
Coin routes: register coins backed by scraped content and track their deployment.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ..config import get_storage
from ..exceptions import require_coin
from ..schemas import CoinResponse, CreateCoinRequest, UpdateCoinRequest
from ..storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/coins", tags=["coins"])


@router.get("")
async def list_coins(
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[CoinResponse]:
    """List all coins, newest first."""
    return [CoinResponse.from_db(c) for c in storage.get_all_coins()]


@router.get("/creator/{address}")
async def list_creator_coins(
    address: str,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> list[CoinResponse]:
    """List coins minted by a wallet address."""
    return [CoinResponse.from_db(c) for c in storage.get_coins_by_creator(address)]


@router.get("/address/{address}")
async def get_coin_by_address(
    address: str,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> CoinResponse:
    """Get a coin by its contract address."""
    coin = require_coin(storage.get_coin_by_address(address))
    return CoinResponse.from_db(coin)


@router.get("/{coin_id}")
async def get_coin(
    coin_id: str,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> CoinResponse:
    coin = require_coin(storage.get_coin(coin_id))
    return CoinResponse.from_db(coin)


@router.post("")
async def create_coin(
    request: CreateCoinRequest,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> CoinResponse:
    """Register a coin, optionally linked to scraped content."""
    if request.scraped_content_id and not storage.get_scraped_content(request.scraped_content_id):
        raise HTTPException(status_code=400, detail="Unknown scraped content")

    coin = storage.create_coin(
        name=request.name,
        symbol=request.symbol,
        creator=request.creator,
        status=request.status,
        address=request.address,
        scraped_content_id=request.scraped_content_id,
        ipfs_uri=request.ipfs_uri,
    )
    logger.info(f"Created coin {coin.symbol} ({coin.id}) for {coin.creator}")
    return CoinResponse.from_db(coin)


@router.patch("/{coin_id}")
async def update_coin(
    coin_id: str,
    request: UpdateCoinRequest,
    storage: Annotated[MemStorage, Depends(get_storage)],
) -> CoinResponse:
    """Record a coin's deployed address or status change."""
    coin = require_coin(
        storage.update_coin(coin_id, address=request.address, status=request.status)
    )
    return CoinResponse.from_db(coin)

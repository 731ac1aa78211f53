"""Wishlist router; every route requires a session"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from shopwave.core.database import get_db
from shopwave.core.security import get_current_user
from shopwave.schemas.common import MAX_ID, SuccessResponse
from shopwave.schemas.wishlist import (
    WishlistCheckResponse,
    WishlistItemCreate,
    WishlistProductResponse,
)
from shopwave.services.wishlist_service import WishlistService

router = APIRouter()


@router.get("", response_model=List[WishlistProductResponse])
async def get_wishlist(
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    return await WishlistService(db).get_wishlist(current_user["id"])


@router.post("", response_model=SuccessResponse)
async def add_to_wishlist(
    item_data: WishlistItemCreate,
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Save a product; 409 if it is already saved"""
    await WishlistService(db).add_item(current_user["id"], item_data.product_id)
    return SuccessResponse()


@router.get("/check/{product_id}", response_model=WishlistCheckResponse)
async def check_wishlist(
    product_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    in_wishlist = await WishlistService(db).is_in_wishlist(current_user["id"], product_id)
    return WishlistCheckResponse(in_wishlist=in_wishlist)


@router.delete("/{product_id}", response_model=SuccessResponse)
async def remove_from_wishlist(
    product_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    await WishlistService(db).remove_item(current_user["id"], product_id)
    return SuccessResponse()

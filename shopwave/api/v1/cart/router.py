"""Cart router; every route requires a session"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from shopwave.core.database import get_db
from shopwave.core.security import get_current_user
from shopwave.schemas.cart import (
    CartActionResponse,
    CartItemCreate,
    CartItemResponse,
    CartItemUpdate,
    CartTotals,
)
from shopwave.schemas.common import MAX_ID, SuccessResponse
from shopwave.services.cart_service import CartService

router = APIRouter()


@router.get("", response_model=List[CartItemResponse])
async def get_cart(
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Cart lines with the current product details"""
    return await CartService(db).get_cart_items(current_user["id"])


@router.get("/totals", response_model=CartTotals)
async def get_cart_totals(
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Subtotal, tax, shipping and total for the current cart"""
    return await CartService(db).get_cart_totals(current_user["id"])


@router.post("", response_model=CartActionResponse)
async def add_to_cart(
    item_data: CartItemCreate,
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Add item to cart, merging with an existing line for the same product"""
    action = await CartService(db).add_item(
        user_id=current_user["id"],
        product_id=item_data.product_id,
        quantity=item_data.quantity,
    )
    return CartActionResponse(action=action)


@router.put("/{item_id}", response_model=CartActionResponse)
async def update_cart_item(
    update_data: CartItemUpdate,
    item_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Set a line's quantity; 0 removes it"""
    action = await CartService(db).set_quantity(
        user_id=current_user["id"],
        item_id=item_id,
        quantity=update_data.quantity,
    )
    return CartActionResponse(action=action)


@router.delete("/{item_id}", response_model=SuccessResponse)
async def remove_from_cart(
    item_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    await CartService(db).remove_item(current_user["id"], item_id)
    return SuccessResponse()


@router.delete("", response_model=SuccessResponse)
async def clear_cart(
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    await CartService(db).clear_cart(current_user["id"])
    return SuccessResponse()

"""Wishlist schemas"""

from pydantic import BaseModel, Field
from datetime import datetime

from .common import MAX_ID
from .product import ProductResponse


class WishlistItemCreate(BaseModel):
    product_id: int = Field(..., ge=1, le=MAX_ID, description="Product ID")


class WishlistProductResponse(ProductResponse):
    """Saved product with its wishlist entry"""
    wishlist_id: int
    added_at: datetime


class WishlistCheckResponse(BaseModel):
    in_wishlist: bool = Field(..., serialization_alias="inWishlist")

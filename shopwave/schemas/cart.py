"""
Cart schemas for request/response validation
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
from datetime import datetime

from .common import MAX_ID


class CartItemCreate(BaseModel):
    """Schema for add to cart request"""
    product_id: int = Field(..., ge=1, le=MAX_ID, description="Product ID")
    quantity: int = Field(default=1, ge=1, description="Quantity to add")


class CartItemUpdate(BaseModel):
    """Schema for updating cart item; 0 removes the line"""
    quantity: int = Field(..., ge=0, description="New quantity")


class CartProduct(BaseModel):
    """Product snapshot taken when the cart is read"""
    id: int
    name: str
    description: Optional[str] = None
    price: float
    image_url: Optional[str] = None
    category: Optional[str] = None
    stock: int

    model_config = ConfigDict(from_attributes=True)


class CartItemResponse(BaseModel):
    """Schema for cart item response"""
    id: int
    user_id: str
    product_id: int
    quantity: int
    created_at: datetime
    updated_at: datetime
    product: CartProduct

    model_config = ConfigDict(from_attributes=True)


class CartTotals(BaseModel):
    """Schema for cart totals"""
    subtotal: float
    tax: float
    shipping: float
    total: float
    total_items: int


class CartActionResponse(BaseModel):
    """Outcome of a cart mutation"""
    success: bool = True
    action: Literal["added", "updated", "deleted"]

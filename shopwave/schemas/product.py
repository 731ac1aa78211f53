"""Product Pydantic schemas"""

from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime


class ProductResponse(BaseModel):
    """Product with its derived rating"""
    id: int
    name: str
    description: Optional[str] = None
    price: float
    image_url: Optional[str] = None
    category: Optional[str] = None
    stock: int
    created_at: datetime
    updated_at: datetime

    # Derived from reviews on every read
    average_rating: float = 0.0
    review_count: int = 0

    model_config = ConfigDict(from_attributes=True)

"""Review schemas"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal, Optional
from datetime import datetime

from shopwave.utils.validators import clean_optional_text

from .common import MAX_ID


class ReviewCreate(BaseModel):
    """Schema for submitting or revising a review"""
    product_id: int = Field(..., ge=1, le=MAX_ID)
    rating: int = Field(..., ge=1, le=5)
    title: Optional[str] = Field(None, max_length=255)
    comment: Optional[str] = Field(None, max_length=5000)

    @field_validator("title", "comment")
    @classmethod
    def sanitize_text(cls, v):
        return clean_optional_text(v)


class ReviewResponse(BaseModel):
    """Schema for review response"""
    id: int
    product_id: int
    user_id: str
    rating: int
    title: Optional[str] = None
    comment: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ReviewActionResponse(BaseModel):
    """Outcome of a review submission"""
    success: bool = True
    action: Literal["created", "updated"]

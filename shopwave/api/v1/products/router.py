"""Products API router"""

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from shopwave.core.database import get_db
from shopwave.schemas.common import MAX_ID
from shopwave.schemas.product import ProductResponse
from shopwave.schemas.review import ReviewResponse
from shopwave.services.product_service import ProductService, SORT_OPTIONS
from shopwave.services.review_service import ReviewService

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
async def list_products(
    category: Optional[str] = Query(None, description="Exact category filter"),
    search: Optional[str] = Query(None, description="Substring of name or description"),
    sort: str = Query("newest", description=f"Sort by: {', '.join(SORT_OPTIONS)}; unknown values sort newest first"),
    db: AsyncSession = Depends(get_db)
):
    """List in-stock products with average rating and review count"""
    return await ProductService(db).list_products(category=category, search=search, sort=sort)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int = Path(..., ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db)
):
    """Get a single product, including out-of-stock ones"""
    return await ProductService(db).get_product(product_id)


@router.get("/{product_id}/reviews", response_model=List[ReviewResponse])
async def list_product_reviews(
    product_id: int = Path(..., ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db)
):
    """Reviews for a product, newest first"""
    return await ReviewService(db).list_reviews(product_id)

"""Category API router"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from shopwave.core.database import get_db
from shopwave.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=List[str])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """Distinct product categories in alphabetical order"""
    return await ProductService(db).get_categories()

"""Review submission router"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shopwave.core.config import settings
from shopwave.core.database import get_db
from shopwave.core.security import get_current_user
from shopwave.middleware.rate_limit import limiter
from shopwave.schemas.review import ReviewActionResponse, ReviewCreate
from shopwave.services.review_service import ReviewService

router = APIRouter()


@router.post("", response_model=ReviewActionResponse)
@limiter.limit(settings.RATE_LIMIT_REVIEWS)
async def submit_review(
    request: Request,
    review_data: ReviewCreate,
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Create or revise the current user's review of a product"""
    action = await ReviewService(db).submit_review(
        user_id=current_user["id"],
        product_id=review_data.product_id,
        rating=review_data.rating,
        title=review_data.title,
        comment=review_data.comment,
    )
    return ReviewActionResponse(action=action)

"""
Review ledger
One review per (user, product); resubmitting revises it in place
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
import logging

from shopwave.models.review import Review
from shopwave.services.product_service import ProductService

logger = logging.getLogger(__name__)


class ReviewService:
    """Review submission and listing"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def submit_review(
        self,
        user_id: str,
        product_id: int,
        rating: int,
        title: Optional[str] = None,
        comment: Optional[str] = None,
    ) -> str:
        """
        Create the user's review for a product, or overwrite the existing one.
        Omitted title/comment clear the previous values.
        Returns "created" or "updated".
        """
        await ProductService(self.db).ensure_exists(product_id)

        result = await self.db.execute(
            select(Review).where(
                and_(Review.user_id == user_id, Review.product_id == product_id)
            )
        )
        existing = result.scalars().first()

        if existing:
            existing.rating = rating
            existing.title = title
            existing.comment = comment
            await self.db.commit()
            logger.info(f"User {user_id} revised review {existing.id} of product {product_id}")
            return "updated"

        self.db.add(
            Review(
                product_id=product_id,
                user_id=user_id,
                rating=rating,
                title=title,
                comment=comment,
            )
        )
        await self.db.commit()
        logger.info(f"User {user_id} reviewed product {product_id} with rating {rating}")
        return "created"

    async def list_reviews(self, product_id: int) -> List[Review]:
        """Reviews for a product, newest first"""
        result = await self.db.execute(
            select(Review)
            .where(Review.product_id == product_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return list(result.scalars().all())

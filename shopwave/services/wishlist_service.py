"""
Wishlist service
Duplicate saves are rejected by the (user_id, product_id) unique constraint
"""

from typing import List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, and_, desc
from sqlalchemy.exc import IntegrityError
import logging

from shopwave.models.product import Product
from shopwave.models.wishlist import WishlistItem
from shopwave.core.exceptions import DuplicateWishlistItemException
from shopwave.services.product_service import ProductService, select_with_rating, product_with_rating

logger = logging.getLogger(__name__)


class WishlistService:
    """Per-user saved products"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_item(self, user_id: str, product_id: int) -> None:
        """Insert or fail with a conflict; there is no existence pre-check"""
        await ProductService(self.db).ensure_exists(product_id)

        self.db.add(WishlistItem(user_id=user_id, product_id=product_id))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Product {product_id} already in wishlist of user {user_id}")
            raise DuplicateWishlistItemException()

        logger.info(f"Saved product {product_id} to wishlist of user {user_id}")

    async def remove_item(self, user_id: str, product_id: int) -> None:
        """Remove a saved product; no error if it was not saved"""
        await self.db.execute(
            delete(WishlistItem).where(
                and_(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
            )
        )
        await self.db.commit()
        logger.info(f"Removed product {product_id} from wishlist of user {user_id}")

    async def is_in_wishlist(self, user_id: str, product_id: int) -> bool:
        result = await self.db.execute(
            select(WishlistItem.id).where(
                and_(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
            )
        )
        return result.scalar_one_or_none() is not None

    async def get_wishlist(self, user_id: str) -> List[Dict[str, Any]]:
        """Saved products with derived rating, most recently saved first"""
        query, _ = select_with_rating(
            WishlistItem.id.label("wishlist_id"),
            WishlistItem.created_at.label("added_at"),
        )
        query = (
            query.join(WishlistItem, WishlistItem.product_id == Product.id)
            .where(WishlistItem.user_id == user_id)
            .order_by(desc(WishlistItem.created_at), desc(WishlistItem.id))
        )

        result = await self.db.execute(query)
        items = []
        for product, average_rating, review_count, wishlist_id, added_at in result.all():
            data = product_with_rating(product, average_rating, review_count)
            data["wishlist_id"] = wishlist_id
            data["added_at"] = added_at
            items.append(data)
        return items

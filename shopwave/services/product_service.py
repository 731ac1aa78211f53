"""
Catalog queries
Every product read is augmented with its derived rating
"""

from typing import List, Dict, Any, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_, desc, asc
from sqlalchemy.sql import Select
import logging

from shopwave.models.product import Product
from shopwave.models.review import Review
from shopwave.core.exceptions import ProductNotFoundException

logger = logging.getLogger(__name__)

SORT_OPTIONS = ("newest", "price_asc", "price_desc", "rating")


def rating_stats():
    """Per-product mean rating and review count, as a joinable subquery"""
    return (
        select(
            Review.product_id.label("product_id"),
            func.avg(Review.rating).label("average_rating"),
            func.count(Review.id).label("review_count"),
        )
        .group_by(Review.product_id)
        .subquery("rating_stats")
    )


def select_with_rating(*extra_columns) -> Tuple[Select, Any]:
    """
    SELECT products with average_rating (0 when unrated) and review_count.
    Returns the statement and the stats subquery so callers can sort on it.
    """
    stats = rating_stats()
    query = (
        select(
            Product,
            func.coalesce(stats.c.average_rating, 0).label("average_rating"),
            func.coalesce(stats.c.review_count, 0).label("review_count"),
            *extra_columns,
        )
        .outerjoin(stats, stats.c.product_id == Product.id)
    )
    return query, stats


def product_with_rating(product: Product, average_rating: Any, review_count: Any) -> Dict[str, Any]:
    """Flatten a product row and its rating columns into one dict"""
    data = product.to_dict()
    data["average_rating"] = float(average_rating or 0)
    data["review_count"] = int(review_count or 0)
    return data


class ProductService:
    """Read-only catalog operations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = "newest",
    ) -> List[Dict[str, Any]]:
        """List in-stock products filtered by category and search text"""
        query, stats = select_with_rating()
        query = query.where(Product.stock > 0)

        if category:
            query = query.where(Product.category == category)

        if search:
            term = f"%{search}%"
            query = query.where(
                or_(
                    Product.name.ilike(term),
                    Product.description.ilike(term),
                )
            )

        average = func.coalesce(stats.c.average_rating, 0)
        count = func.coalesce(stats.c.review_count, 0)

        if sort == "price_asc":
            query = query.order_by(asc(Product.price), desc(Product.id))
        elif sort == "price_desc":
            query = query.order_by(desc(Product.price), desc(Product.id))
        elif sort == "rating":
            query = query.order_by(desc(average), desc(count), desc(Product.id))
        else:  # newest (default, also for unknown values)
            query = query.order_by(desc(Product.created_at), desc(Product.id))

        result = await self.db.execute(query)
        return [product_with_rating(*row) for row in result.all()]

    async def get_product(self, product_id: int) -> Dict[str, Any]:
        """Single product with rating; out-of-stock products are still returned"""
        query, _ = select_with_rating()
        result = await self.db.execute(query.where(Product.id == product_id))
        row = result.first()

        if row is None:
            raise ProductNotFoundException(product_id)

        return product_with_rating(*row)

    async def get_categories(self) -> List[str]:
        """Distinct non-null categories, sorted"""
        result = await self.db.execute(
            select(Product.category)
            .where(Product.category.is_not(None))
            .distinct()
            .order_by(Product.category)
        )
        return list(result.scalars().all())

    async def ensure_exists(self, product_id: int) -> None:
        """Raise ProductNotFoundException unless the product row exists"""
        result = await self.db.execute(
            select(Product.id).where(Product.id == product_id)
        )
        if result.scalar_one_or_none() is None:
            logger.warning(f"Product {product_id} not found")
            raise ProductNotFoundException(product_id)

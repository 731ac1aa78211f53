"""
Cart service for managing cart operations
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_, func
from sqlalchemy.orm import selectinload
import logging

from shopwave.models.cart import CartItem
from shopwave.core.config import settings
from shopwave.services.product_service import ProductService

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def cart_total(items: Iterable[CartItem]) -> Decimal:
    """Sum of quantity x current product price"""
    return sum(
        (Decimal(str(item.product.price)) * item.quantity for item in items),
        Decimal("0.00"),
    ).quantize(CENT)


def cart_count(items: Iterable[CartItem]) -> int:
    """Total number of units in the cart"""
    return sum(item.quantity for item in items)


def price_breakdown(subtotal: Decimal) -> Dict[str, Decimal]:
    """Apply the flat tax rate and shipping cost to a subtotal"""
    shipping = Decimal(str(settings.SHIPPING_COST)).quantize(CENT)
    total = (subtotal * (1 + Decimal(str(settings.TAX_RATE)))).quantize(CENT, rounding=ROUND_HALF_UP)
    return {
        "subtotal": subtotal,
        "tax": total - subtotal,
        "shipping": shipping,
        "total": total + shipping,
    }


class CartService:
    """
    Service for managing cart operations
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_item(self, user_id: str, product_id: int, quantity: int = 1) -> str:
        """
        Add item to cart or merge into the existing line.
        Returns "added" or "updated".
        """
        await ProductService(self.db).ensure_exists(product_id)

        result = await self.db.execute(
            select(CartItem).where(
                and_(
                    CartItem.user_id == user_id,
                    CartItem.product_id == product_id
                )
            )
        )
        existing_item = result.scalars().first()

        # Read-then-write: two concurrent adds may both see no line, or
        # overwrite each other's increment.
        if existing_item:
            new_quantity = existing_item.quantity + quantity
            existing_item.quantity = new_quantity
            await self.db.commit()
            logger.info(f"Cart line {existing_item.id} for user {user_id} now has quantity {new_quantity}")
            return "updated"

        self.db.add(
            CartItem(
                user_id=user_id,
                product_id=product_id,
                quantity=quantity
            )
        )
        await self.db.commit()
        logger.info(f"Added product {product_id} x{quantity} to cart of user {user_id}")
        return "added"

    async def get_cart_items(self, user_id: str) -> List[CartItem]:
        """
        Get all items in user's cart, with the current product row loaded
        """
        result = await self.db.execute(
            select(CartItem)
            .options(selectinload(CartItem.product))
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.created_at.desc(), CartItem.id.desc())
        )
        return list(result.scalars().all())

    async def set_quantity(self, user_id: str, item_id: int, quantity: int) -> str:
        """
        Replace a line's quantity, or delete the line when quantity is 0.
        Lines owned by other users are left untouched without error.
        """
        if quantity == 0:
            await self.db.execute(
                delete(CartItem).where(
                    and_(CartItem.id == item_id, CartItem.user_id == user_id)
                )
            )
            await self.db.commit()
            logger.info(f"Deleted cart line {item_id} for user {user_id}")
            return "deleted"

        await self.db.execute(
            update(CartItem)
            .where(and_(CartItem.id == item_id, CartItem.user_id == user_id))
            .values(quantity=quantity, updated_at=func.now())
        )
        await self.db.commit()
        logger.info(f"Set cart line {item_id} for user {user_id} to quantity {quantity}")
        return "updated"

    async def remove_item(self, user_id: str, item_id: int) -> None:
        """Remove item from cart; no error if it is already gone"""
        await self.db.execute(
            delete(CartItem).where(
                and_(CartItem.id == item_id, CartItem.user_id == user_id)
            )
        )
        await self.db.commit()
        logger.info(f"Removed cart line {item_id} for user {user_id}")

    async def clear_cart(self, user_id: str) -> None:
        """Clear all items from user's cart"""
        await self.db.execute(
            delete(CartItem).where(CartItem.user_id == user_id)
        )
        await self.db.commit()
        logger.info(f"Cleared cart of user {user_id}")

    async def get_cart_totals(self, user_id: str) -> Dict[str, Any]:
        """
        Calculate cart totals
        """
        items = await self.get_cart_items(user_id)
        totals: Dict[str, Any] = price_breakdown(cart_total(items))
        totals["total_items"] = cart_count(items)
        return totals

"""
Simulated checkout
No order is persisted, no payment gateway is contacted and stock is not
touched; the cart is cleared and a throwaway order number is reported.
"""

from typing import Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
import asyncio
import logging
import secrets

from shopwave.core.config import settings
from shopwave.schemas.checkout import DeliveryAddress, PaymentMethod
from shopwave.services.cart_service import CartService

logger = logging.getLogger(__name__)


def generate_order_number() -> str:
    """Random 6-digit order number (100000-999999)"""
    return str(100000 + secrets.randbelow(900000))


class CheckoutService:
    """Checkout flow over the user's current cart"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.cart_service = CartService(db)

    async def checkout(
        self,
        user_id: str,
        payment_method: PaymentMethod,
        delivery_address: DeliveryAddress,
    ) -> Dict[str, Any]:
        totals = await self.cart_service.get_cart_totals(user_id)

        logger.info(
            f"Processing {payment_method.value} checkout for user {user_id}: "
            f"{totals['total_items']} items, total {totals['total']}, "
            f"ship to {delivery_address.city}, {delivery_address.country}"
        )

        # Stands in for payment processing
        await asyncio.sleep(settings.CHECKOUT_PROCESSING_DELAY)

        await self.cart_service.clear_cart(user_id)

        order_number = generate_order_number()
        logger.info(f"Checkout complete for user {user_id}, order number {order_number}")

        return {
            "success": True,
            "order_number": order_number,
            "payment_method": payment_method,
            **totals,
        }

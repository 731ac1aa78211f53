"""Checkout router"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shopwave.core.config import settings
from shopwave.core.database import get_db
from shopwave.core.security import get_current_user
from shopwave.middleware.rate_limit import limiter
from shopwave.schemas.checkout import CheckoutRequest, CheckoutResponse
from shopwave.services.checkout_service import CheckoutService

router = APIRouter()


@router.post("", response_model=CheckoutResponse)
@limiter.limit(settings.RATE_LIMIT_CHECKOUT)
async def checkout(
    request: Request,
    checkout_data: CheckoutRequest,
    current_user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """
    Simulated checkout: validates the delivery address, prices the cart
    with tax, waits out the processing delay and clears the cart.
    Nothing is charged and no order is stored.
    """
    return await CheckoutService(db).checkout(
        user_id=current_user["id"],
        payment_method=checkout_data.payment_method,
        delivery_address=checkout_data.delivery_address,
    )

"""Session identity routes"""

from fastapi import APIRouter, Depends, Response
from typing import Optional
import logging

from shopwave.core.config import settings
from shopwave.core.security import get_current_user, get_current_user_optional
from shopwave.schemas.common import SuccessResponse
from shopwave.schemas.user import CurrentUserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/me", response_model=CurrentUserResponse)
async def get_me(current_user: dict = Depends(get_current_user)):
    """Identity carried by the session token"""
    return current_user


@router.get("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    current_user: Optional[dict] = Depends(get_current_user_optional)
):
    """Drop the session cookie; works with or without a valid session"""
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        path="/",
        secure=True,
        httponly=True,
        samesite="none",
    )
    if current_user:
        logger.info(f"User {current_user['id']} logged out")
    return SuccessResponse()

"""
Session/identity gate
Resolves an inbound request to the identity issued by the session provider
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import logging

from .config import settings
from .exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

# Security scheme; a missing header falls back to the session cookie
security = HTTPBearer(auto_error=False)


class SecurityUtils:
    """Security utility functions"""

    @staticmethod
    def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """Create JWT access token"""
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + (
            expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        )
        to_encode.update({"exp": expire, "type": "access"})
        return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """Decode and validate JWT token"""
        try:
            return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        except JWTError:
            raise UnauthorizedException("Invalid authentication credentials")


def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None


def _identity_from_token(token: str) -> Dict[str, Any]:
    payload = SecurityUtils.decode_token(token)

    if payload.get("type") != "access":
        raise UnauthorizedException("Invalid token type")

    user_id = payload.get("sub")
    if not user_id:
        raise UnauthorizedException("Invalid authentication credentials")

    return {
        "id": str(user_id),
        "email": payload.get("email"),
        "name": payload.get("name"),
    }


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """
    Get current authenticated user (required)
    Raises 401 if no session token is present or it does not verify
    """
    token = _extract_token(request, credentials)
    if not token:
        logger.warning(f"Rejected unauthenticated {request.method} {request.url.path}")
        raise UnauthorizedException("Authentication required")

    user = _identity_from_token(token)
    # Lets the rate limiter key on the user instead of the client address
    request.state.user_id = user["id"]
    return user


async def get_current_user_optional(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Dict[str, Any]]:
    """
    Get current user if authenticated, otherwise None
    Useful for endpoints that work for both authenticated and anonymous users
    """
    token = _extract_token(request, credentials)
    if not token:
        return None

    try:
        return _identity_from_token(token)
    except UnauthorizedException:
        return None

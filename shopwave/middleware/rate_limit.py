"""Rate limiting using slowapi"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
import logging

from shopwave.core.config import settings
from shopwave.core.exceptions import error_body

logger = logging.getLogger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Get rate limit key based on user or IP"""
    # Set by the identity gate once the session token verifies
    user_id = getattr(request.state, "user_id", None)

    if user_id:
        return f"user:{user_id}"

    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
    else:
        ip = request.client.host if request.client else "unknown"

    return f"ip:{ip}"


limiter = Limiter(
    key_func=get_rate_limit_key,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    storage_uri=settings.RATE_LIMIT_STORAGE_URI,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)


async def custom_rate_limit_handler(request: Request, exc: RateLimitExceeded) -> Response:
    logger.warning(f"Rate limit exceeded for {get_rate_limit_key(request)} on {request.url.path}")
    return JSONResponse(
        status_code=429,
        content=error_body("RATE_LIMIT_EXCEEDED", f"Too many requests. {exc.detail}"),
    )

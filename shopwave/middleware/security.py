"""Security headers middleware"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

DOCS_CSP = (
    "default-src 'self' 'unsafe-inline' https: data: blob:; "
    "script-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "img-src 'self' data: https:"
)

API_CSP = "default-src 'none'; frame-ancestors 'none'"


class SecurityMiddleware(BaseHTTPMiddleware):
    """Adds security headers to every response"""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        path = request.url.path
        # Swagger UI and ReDoc load scripts and styles from a CDN
        if path.startswith("/api/docs") or path.startswith("/api/redoc"):
            response.headers["Content-Security-Policy"] = DOCS_CSP
        else:
            response.headers["Content-Security-Policy"] = API_CSP

        return response

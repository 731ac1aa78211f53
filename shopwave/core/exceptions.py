"""
Custom exception classes and error handlers
Provides consistent error responses across the application
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class ShopWaveException(HTTPException):
    """Base exception class for ShopWave application"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class UnauthorizedException(ShopWaveException):
    """401 Unauthorized"""

    def __init__(self, detail: str = "Unauthorized", error_code: str = "UNAUTHORIZED"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code=error_code,
            headers={"WWW-Authenticate": "Bearer"}
        )


class NotFoundException(ShopWaveException):
    """404 Not Found"""

    def __init__(self, detail: str = "Not found", error_code: str = "NOT_FOUND"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=error_code
        )


class ConflictException(ShopWaveException):
    """409 Conflict"""

    def __init__(self, detail: str, error_code: str = "CONFLICT"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=error_code
        )


# Business logic exceptions
class ProductNotFoundException(NotFoundException):
    """Referenced product does not exist"""

    def __init__(self, product_id: int):
        super().__init__(
            detail=f"Product {product_id} not found",
            error_code="PRODUCT_NOT_FOUND"
        )


class DuplicateWishlistItemException(ConflictException):
    """Product is already saved in the user's wishlist"""

    def __init__(self):
        super().__init__(
            detail="Item already in wishlist",
            error_code="DUPLICATE_WISHLIST_ITEM"
        )


def error_body(code: str, message: str, details: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """Build the error payload shared by every handler"""
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if details is not None:
        body["error"]["details"] = details
    return body


def _status_code_name(status_code: int) -> str:
    return {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        422: "VALIDATION_ERROR",
        429: "RATE_LIMIT_EXCEEDED",
    }.get(status_code, "HTTP_ERROR")


async def shopwave_exception_handler(request: Request, exc: ShopWaveException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error_code or _status_code_name(exc.status_code), exc.detail),
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(_status_code_name(exc.status_code), str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request validation failures with field-level detail"""
    details = []
    for err in exc.errors():
        # First element of loc is the source (body, query, path)
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or str(err.get("loc", ("",))[0])
        details.append({"field": field, "message": err.get("msg", "Invalid value")})

    logger.warning(f"Validation failed for {request.method} {request.url.path}: {details}")

    return JSONResponse(
        status_code=422,
        content=error_body("VALIDATION_ERROR", "Invalid request", details),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application"""
    app.add_exception_handler(ShopWaveException, shopwave_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

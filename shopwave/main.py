"""Main FastAPI application with all middleware"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from shopwave.core.config import settings
from shopwave.core.events import lifespan
from shopwave.core.exceptions import register_exception_handlers
from shopwave.core.middleware import setup_middleware
from shopwave.middleware.rate_limit import limiter, custom_rate_limit_handler
from shopwave.api.health import router as health_router
from shopwave.api.v1 import api_router


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="ShopWave storefront API: catalog, cart, wishlist, reviews and checkout",
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, custom_rate_limit_handler)
    # Applies RATE_LIMIT_DEFAULT to routes without their own limit
    app.add_middleware(SlowAPIMiddleware)

    register_exception_handlers(app)
    setup_middleware(app)

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(health_router)

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "docs": "/api/docs",
            "health": "/health"
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "shopwave.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )

"""
Application lifecycle events
Handles startup and shutdown tasks
"""

from fastapi import FastAPI
from sqlalchemy import select, func
from contextlib import asynccontextmanager
from decimal import Decimal
import logging

from .config import settings
from .database import init_db, close_db, get_db_context
from .logging import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Wireless Headphones",
        "description": "Over-ear noise cancelling headphones with 30 hour battery life",
        "price": Decimal("199.99"),
        "category": "Electronics",
        "stock": 25,
        "image_url": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e",
    },
    {
        "name": "Smart Watch",
        "description": "Fitness tracking, heart rate monitor and notifications",
        "price": Decimal("249.00"),
        "category": "Electronics",
        "stock": 12,
        "image_url": "https://images.unsplash.com/photo-1523275335684-37898b6baf30",
    },
    {
        "name": "Leather Backpack",
        "description": "Handmade full-grain leather backpack with laptop sleeve",
        "price": Decimal("129.50"),
        "category": "Accessories",
        "stock": 8,
        "image_url": "https://images.unsplash.com/photo-1548036328-c9fa89d128fa",
    },
    {
        "name": "Ceramic Pour-Over Set",
        "description": "Dripper, carafe and two cups",
        "price": Decimal("49.99"),
        "category": "Home",
        "stock": 40,
        "image_url": None,
    },
    {
        "name": "Running Shoes",
        "description": "Lightweight trainers with responsive foam",
        "price": Decimal("89.99"),
        "category": "Sports",
        "stock": 0,
        "image_url": None,
    },
]


async def create_startup_data() -> None:
    """Seed a sample catalog when the products table is empty"""
    from shopwave.models.product import Product

    async with get_db_context() as db:
        count = (await db.execute(select(func.count(Product.id)))).scalar_one()
        if count:
            logger.info(f"Catalog already has {count} products, skipping seed")
            return

        db.add_all(Product(**data) for data in SAMPLE_PRODUCTS)
    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Handles startup and shutdown events
    """
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    try:
        await init_db()

        if settings.SEED_SAMPLE_DATA:
            await create_startup_data()

        logger.info(f"{settings.APP_NAME} started successfully")

        yield

    finally:
        logger.info(f"Shutting down {settings.APP_NAME}...")
        await close_db()
        logger.info(f"{settings.APP_NAME} shutdown complete")

"""Catalog product model"""

from sqlalchemy import Column, String, Text, Numeric, Integer, Index, CheckConstraint
from sqlalchemy.orm import relationship

from .base import BaseModel, TimestampedModel


class Product(BaseModel, TimestampedModel):
    """Product available in the storefront catalog"""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=True, index=True)
    image_url = Column(String(500), nullable=True)

    # Pricing and inventory
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    # Relationships
    cart_items = relationship("CartItem", back_populates="product", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="product", cascade="all, delete-orphan")
    wishlist_items = relationship("WishlistItem", back_populates="product", cascade="all, delete-orphan")

    # Constraints
    __table_args__ = (
        CheckConstraint("price >= 0", name="check_non_negative_price"),
        CheckConstraint("stock >= 0", name="check_non_negative_stock"),
        Index("idx_products_stock", "stock"),
    )

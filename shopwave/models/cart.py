"""
Shopping cart model
One row per (user, product) line item
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from .base import BaseModel, TimestampedModel


class CartItem(BaseModel, TimestampedModel):
    """Shopping cart line items"""

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Opaque identity issued by the session provider
    user_id = Column(String(255), nullable=False)

    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    product = relationship("Product", back_populates="cart_items")

    # (user_id, product_id) is kept unique by merging in CartService.add_item,
    # not by a constraint
    __table_args__ = (
        CheckConstraint("quantity > 0", name="check_positive_cart_quantity"),
        Index("idx_cart_items_user_product", "user_id", "product_id"),
    )

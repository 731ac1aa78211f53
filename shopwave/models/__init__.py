"""Models package initialization"""

from .base import Base
from .product import Product
from .cart import CartItem
from .review import Review
from .wishlist import WishlistItem

__all__ = [
    "Base",
    "Product",
    "CartItem",
    "Review",
    "WishlistItem",
]

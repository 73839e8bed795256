"""
Init file for the SQLAlchemy models.
"""

from .order_products import order_products
from .orders import Order
from .products import Product
from .users import User

__all__ = [
    "Order",
    "Product",
    "User",
    "order_products",
]

from .order_dao import OrderDao
from .product_dao import ProductDao
from .user_dao import UserDao

__all__ = ["OrderDao", "ProductDao", "UserDao"]

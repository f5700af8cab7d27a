"""
Database table definitions
"""
from .user import User
from .customer import Customer
from .product import Product
from .order import Order, OrderItem

__all__ = [
    "User",
    "Customer",
    "Product",
    "Order",
    "OrderItem",
]

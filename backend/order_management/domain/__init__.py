"""
Domain Layer - Business Entities

Entities and value objects with their invariants. Nothing in this package
touches the database or the HTTP layer.

Author: TM3
Date: 2025-10-17
"""
from order_management.domain.value_objects import Email, Phone
from order_management.domain.order import Order, OrderItem, OrderStatus
from order_management.domain.customer import Customer
from order_management.domain.product import Product
from order_management.domain.user import User, UserRole

__all__ = [
    'Email',
    'Phone',
    'Order',
    'OrderItem',
    'OrderStatus',
    'Customer',
    'Product',
    'User',
    'UserRole',
]

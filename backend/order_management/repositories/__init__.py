"""
Repository Layer - Data Access

This layer handles all database queries and returns domain objects.
Repositories abstract away SQL details from business logic.

Author: TM3
Date: 2025-10-17
"""
from order_management.repositories.customer_repository import CustomerRepository
from order_management.repositories.order_repository import OrderRepository
from order_management.repositories.product_repository import ProductRepository
from order_management.repositories.user_repository import UserRepository

__all__ = [
    'CustomerRepository',
    'OrderRepository',
    'ProductRepository',
    'UserRepository',
]

"""
Service Layer - use cases on top of the domain and repositories
"""
from order_management.services.auth_service import AuthService
from order_management.services.customer_service import CustomerService
from order_management.services.order_service import OrderService
from order_management.services.product_service import ProductService
from order_management.services.user_service import UserService

__all__ = [
    'AuthService',
    'CustomerService',
    'OrderService',
    'ProductService',
    'UserService',
]

"""
API schemas - request bodies and response projections
"""
from order_management.schemas.auth import LoginRequest, TokenResponse, UserCreate, UserResponse, UserUpdate
from order_management.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from order_management.schemas.order import (
    OrderCreate,
    OrderItemCreate,
    OrderItemResponse,
    OrderItemUpdate,
    OrderResponse,
    OrderUpdate,
)
from order_management.schemas.product import ProductCreate, ProductResponse, ProductUpdate

__all__ = [
    'LoginRequest',
    'TokenResponse',
    'UserCreate',
    'UserResponse',
    'UserUpdate',
    'CustomerCreate',
    'CustomerResponse',
    'CustomerUpdate',
    'OrderCreate',
    'OrderItemCreate',
    'OrderItemResponse',
    'OrderItemUpdate',
    'OrderResponse',
    'OrderUpdate',
    'ProductCreate',
    'ProductResponse',
    'ProductUpdate',
]

"""
Service providers for the routers

Routes receive services through Depends(...) so tests can swap them with
app.dependency_overrides.
"""
from order_management.core.config import settings
from order_management.core.security import AccessTokenGenerator, AuthConfig, PasswordHasher
from order_management.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
    UserRepository,
)
from order_management.services import (
    AuthService,
    CustomerService,
    OrderService,
    ProductService,
    UserService,
)


def get_order_service() -> OrderService:
    return OrderService(OrderRepository(), CustomerRepository(), ProductRepository())


def get_customer_service() -> CustomerService:
    return CustomerService(CustomerRepository())


def get_product_service() -> ProductService:
    return ProductService(ProductRepository())


def get_user_service() -> UserService:
    return UserService(UserRepository(), PasswordHasher())


def get_auth_service() -> AuthService:
    token_generator = AccessTokenGenerator(
        expiration_minutes=settings.JWT_EXPIRATION_MINUTES,
        signing_key=AuthConfig.get_auth_secret(),
    )
    return AuthService(UserRepository(), token_generator, PasswordHasher())

"""
Pytest fixtures and configuration for the Order Management tests

Services are exercised against the in-memory repositories defined here;
repository tests mock psycopg2 instead.

Author: TM3
Date: 2025-10-17
"""
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

import pytest

from order_management.core.security import AccessTokenGenerator
from order_management.domain.customer import Customer
from order_management.domain.order import Order
from order_management.domain.product import Product
from order_management.domain.user import User, UserRole
from order_management.domain.value_objects import Email, Phone
from order_management.services import (
    AuthService,
    CustomerService,
    OrderService,
    ProductService,
    UserService,
)
from order_management.services.observers import ServiceObserver

TEST_AUTH_SECRET = "test-secret-key"


class InMemoryRepository:
    """Dict-backed store keyed by entity id"""

    def __init__(self):
        self.records: Dict[UUID, object] = {}
        self.update_calls = 0

    def find_by_id(self, entity_id: UUID):
        return self.records.get(entity_id)

    def find_all(self) -> List:
        return list(self.records.values())

    def add(self, entity) -> None:
        self.records[entity.id] = entity

    def update(self, entity) -> None:
        self.update_calls += 1
        self.records[entity.id] = entity

    def delete(self, entity_id: UUID) -> None:
        self.records.pop(entity_id, None)


class InMemoryUserRepository(InMemoryRepository):

    def find_by_email(self, email: str) -> Optional[User]:
        normalized = email.strip().lower()
        return next((u for u in self.records.values() if u.email.value == normalized), None)


class FakePasswordHasher:
    """Reversible stand-in for bcrypt so tests stay fast"""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


class RecordingObserver(ServiceObserver):
    """Collects every notification as (hook, operation, payload)"""

    def __init__(self):
        self.events = []

    def before(self, operation, context):
        self.events.append(("before", operation, context))

    def succeeded(self, operation, result):
        self.events.append(("succeeded", operation, result))

    def failed(self, operation, error):
        self.events.append(("failed", operation, error))


# =============================================================================
# Domain fixtures
# =============================================================================

def make_customer(name: str = "Maria Silva") -> Customer:
    return Customer(
        name,
        Email.create("maria@example.com"),
        Phone.create("5511999999999"),
        "Rua das Flores, 100",
    )


def make_product(name: str = "Keyboard", price: str = "25.00") -> Product:
    return Product(name=name, sku=f"SKU-{name.upper()}", price=Decimal(price), stock_quantity=10)


@pytest.fixture
def customer() -> Customer:
    return make_customer()


@pytest.fixture
def product() -> Product:
    return make_product()


@pytest.fixture
def pending_order(customer, product) -> Order:
    order = Order(customer.id)
    order.add_item(product.id, 2, Decimal("10.00"))
    return order


# =============================================================================
# Repository fixtures
# =============================================================================

@pytest.fixture
def customer_repository(customer) -> InMemoryRepository:
    repo = InMemoryRepository()
    repo.add(customer)
    return repo


@pytest.fixture
def product_repository(product) -> InMemoryRepository:
    repo = InMemoryRepository()
    repo.add(product)
    return repo


@pytest.fixture
def order_repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def admin_user(user_repository, password_hasher) -> User:
    user = User("Admin", Email.create("admin@example.com"), password_hasher.hash("s3cret-pass"), UserRole.ADMIN)
    user_repository.add(user)
    return user


# =============================================================================
# Service fixtures
# =============================================================================

@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def order_service(order_repository, customer_repository, product_repository, observer) -> OrderService:
    return OrderService(order_repository, customer_repository, product_repository, observers=[observer])


@pytest.fixture
def customer_service(customer_repository) -> CustomerService:
    return CustomerService(customer_repository, observers=[])


@pytest.fixture
def product_service(product_repository) -> ProductService:
    return ProductService(product_repository, observers=[])


@pytest.fixture
def user_service(user_repository, password_hasher) -> UserService:
    return UserService(user_repository, password_hasher, observers=[])


@pytest.fixture
def token_generator() -> AccessTokenGenerator:
    return AccessTokenGenerator(expiration_minutes=60, signing_key=TEST_AUTH_SECRET)


@pytest.fixture
def auth_service(user_repository, token_generator, password_hasher) -> AuthService:
    return AuthService(user_repository, token_generator, password_hasher, observers=[])

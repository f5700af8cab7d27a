"""
Fixtures for API tests: a TestClient whose services run on the in-memory
repositories, plus bearer headers for each role.
"""
import pytest
from fastapi.testclient import TestClient

from order_management.api import dependencies
from order_management.domain.user import User, UserRole
from order_management.domain.value_objects import Email
from order_management.main import app

AUTH_SECRET = "test-secret-key"


@pytest.fixture(autouse=True)
def auth_secret(monkeypatch):
    monkeypatch.setenv("AUTH_SECRET", AUTH_SECRET)


@pytest.fixture
def client(order_service, customer_service, product_service, user_service, auth_service):
    app.dependency_overrides[dependencies.get_order_service] = lambda: order_service
    app.dependency_overrides[dependencies.get_customer_service] = lambda: customer_service
    app.dependency_overrides[dependencies.get_product_service] = lambda: product_service
    app.dependency_overrides[dependencies.get_user_service] = lambda: user_service
    app.dependency_overrides[dependencies.get_auth_service] = lambda: auth_service

    yield TestClient(app)

    app.dependency_overrides.clear()


def bearer(token_generator, role: UserRole) -> dict:
    user = User(role.value, Email.create(f"{role.value.lower()}@example.com"), "hash", role)
    return {"Authorization": f"Bearer {token_generator.generate(user)}"}


@pytest.fixture
def admin_headers(token_generator) -> dict:
    return bearer(token_generator, UserRole.ADMIN)


@pytest.fixture
def user_headers(token_generator) -> dict:
    return bearer(token_generator, UserRole.USER)

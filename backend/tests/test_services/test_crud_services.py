"""
Unit tests for CustomerService and ProductService
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from order_management.core.exceptions import DomainValidationError, NotFoundError, ValidationError
from order_management.schemas.customer import CustomerCreate, CustomerUpdate
from order_management.schemas.product import ProductCreate, ProductUpdate
from order_management.services.common import value_for_update


class TestValueForUpdate:

    @pytest.mark.parametrize("raw", [None, "", "   ", "string", "String"])
    def test_absent_values(self, raw):
        assert value_for_update(raw) is None

    def test_present_value_is_returned_as_is(self):
        assert value_for_update("New name") == "New name"


class TestCustomerService:

    def test_create_customer(self, customer_service, customer_repository):
        request = CustomerCreate(
            name="João Souza",
            email="Joao@Example.com",
            phone="5521988887777",
            address="Av. Paulista, 1000",
        )

        response = customer_service.create(request)

        assert response.email == "joao@example.com"
        assert customer_repository.find_by_id(response.id) is not None

    def test_create_with_bad_phone(self, customer_service):
        request = CustomerCreate(name="João", email="joao@example.com", phone="123", address="Rua 1")

        with pytest.raises(ValidationError, match="Phone format is invalid."):
            customer_service.create(request)

    def test_update_ignores_blank_and_placeholder_fields(self, customer_service, customer):
        request = CustomerUpdate(name="", email="string", phone="5521988887777", address=None)

        response = customer_service.update(customer.id, request)

        assert response.name == "Maria Silva"
        assert response.email == "maria@example.com"
        assert response.phone == "5521988887777"
        assert response.address == "Rua das Flores, 100"

    def test_update_not_found(self, customer_service):
        with pytest.raises(NotFoundError, match="Customer with id"):
            customer_service.update(uuid4(), CustomerUpdate(name="X"))

    def test_delete(self, customer_service, customer_repository, customer):
        assert customer_service.delete(customer.id) is True
        assert customer_repository.find_all() == []

    def test_get_all(self, customer_service, customer):
        assert [c.id for c in customer_service.get_all()] == [customer.id]


class TestProductService:

    def test_create_product(self, product_service, product_repository):
        response = product_service.create(ProductCreate(name="Monitor", sku="MN-27", price=Decimal("899.00")))

        assert response.stock_quantity == 0
        assert response.is_active is True
        assert product_repository.find_by_id(response.id).sku == "MN-27"

    def test_create_with_negative_price(self, product_service):
        with pytest.raises(DomainValidationError, match="Price must be greater or equal to 0."):
            product_service.create(ProductCreate(name="Monitor", sku="MN-27", price=Decimal("-1")))

    def test_update_keeps_absent_fields(self, product_service, product):
        response = product_service.update(product.id, ProductUpdate(stock_quantity=42, name=" "))

        assert response.stock_quantity == 42
        assert response.name == "Keyboard"
        assert response.price == Decimal("25.00")

    def test_get_by_id_not_found(self, product_service):
        with pytest.raises(NotFoundError):
            product_service.get_by_id(uuid4())

"""
Customer Service - CRUD over customers
"""
from typing import List, Optional, Sequence
from uuid import UUID

from order_management.core.exceptions import NotFoundError
from order_management.domain.customer import Customer
from order_management.domain.value_objects import Email, Phone
from order_management.repositories.interfaces import CustomerStore
from order_management.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from order_management.services.common import value_for_update
from order_management.services.observers import LoggingObserver, ServiceObserver, observed


class CustomerService:

    def __init__(self, repository: CustomerStore, observers: Optional[Sequence[ServiceObserver]] = None):
        self.repository = repository
        self.observers = list(observers) if observers is not None else [LoggingObserver()]

    @observed("customer.create")
    def create(self, request: CustomerCreate) -> CustomerResponse:
        customer = Customer(
            request.name,
            Email.create(request.email),
            Phone.create(request.phone),
            request.address,
        )
        self.repository.add(customer)
        return CustomerResponse.from_domain(customer)

    @observed("customer.update")
    def update(self, customer_id: UUID, request: CustomerUpdate) -> CustomerResponse:
        customer = self._get_customer(customer_id)

        email = value_for_update(request.email)
        phone = value_for_update(request.phone)

        customer.update_profile(
            name=value_for_update(request.name),
            email=Email.create(email) if email is not None else None,
            phone=Phone.create(phone) if phone is not None else None,
            address=value_for_update(request.address),
        )

        self.repository.update(customer)
        return CustomerResponse.from_domain(customer)

    @observed("customer.delete")
    def delete(self, customer_id: UUID) -> bool:
        self._get_customer(customer_id)
        self.repository.delete(customer_id)
        return True

    @observed("customer.get")
    def get_by_id(self, customer_id: UUID) -> CustomerResponse:
        return CustomerResponse.from_domain(self._get_customer(customer_id))

    @observed("customer.list")
    def get_all(self) -> List[CustomerResponse]:
        return [CustomerResponse.from_domain(c) for c in self.repository.find_all()]

    def _get_customer(self, customer_id: UUID) -> Customer:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise NotFoundError("Customer", customer_id)
        return customer

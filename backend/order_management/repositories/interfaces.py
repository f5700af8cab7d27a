"""
Repository contracts

Services depend on these protocols, never on a concrete repository, so the
SQL implementations can be swapped for in-memory fakes in tests.
"""
from typing import List, Optional, Protocol
from uuid import UUID

from order_management.domain.customer import Customer
from order_management.domain.order import Order
from order_management.domain.product import Product
from order_management.domain.user import User


class CustomerLookup(Protocol):
    def find_by_id(self, customer_id: UUID) -> Optional[Customer]: ...


class ProductLookup(Protocol):
    def find_by_id(self, product_id: UUID) -> Optional[Product]: ...


class OrderStore(Protocol):
    def find_by_id(self, order_id: UUID) -> Optional[Order]: ...

    def find_all(self) -> List[Order]: ...

    def add(self, order: Order) -> None: ...

    def update(self, order: Order) -> None: ...

    def delete(self, order_id: UUID) -> None: ...


class CustomerStore(CustomerLookup, Protocol):
    def find_all(self) -> List[Customer]: ...

    def add(self, customer: Customer) -> None: ...

    def update(self, customer: Customer) -> None: ...

    def delete(self, customer_id: UUID) -> None: ...


class ProductStore(ProductLookup, Protocol):
    def find_all(self) -> List[Product]: ...

    def add(self, product: Product) -> None: ...

    def update(self, product: Product) -> None: ...

    def delete(self, product_id: UUID) -> None: ...


class UserStore(Protocol):
    def find_by_id(self, user_id: UUID) -> Optional[User]: ...

    def find_by_email(self, email: str) -> Optional[User]: ...

    def find_all(self) -> List[User]: ...

    def add(self, user: User) -> None: ...

    def update(self, user: User) -> None: ...

    def delete(self, user_id: UUID) -> None: ...

"""
Customer Entity

Customers are referenced by orders through their ID only.

Author: TM3
Date: 2025-10-17
"""
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from order_management.core.exceptions import DomainValidationError
from order_management.domain.order import utc_now
from order_management.domain.value_objects import Email, Phone

# Swagger's default example value, rejected as a real name/address
PLACEHOLDER_VALUE = "string"


def _validate_required(value: Optional[str], field_name: str) -> None:
    if value is None or not value.strip():
        raise DomainValidationError(f"{field_name} cannot be null or empty.", {"field": field_name})
    if value.strip().lower() == PLACEHOLDER_VALUE:
        raise DomainValidationError(f"{field_name} format is invalid.", {"field": field_name})


class Customer:
    """Customer with validated contact data"""

    def __init__(self, name: str, email: Email, phone: Phone, address: str):
        if email is None:
            raise DomainValidationError("Email is required.")
        if phone is None:
            raise DomainValidationError("Phone is required.")
        _validate_required(name, "Name")
        _validate_required(address, "Address")

        self._id = uuid4()
        self._name = name
        self._email = email
        self._phone = phone
        self._address = address
        self._created_at = utc_now()

    @classmethod
    def rehydrate(
        cls,
        id: UUID,
        name: str,
        email: Email,
        phone: Phone,
        address: str,
        created_at: datetime,
    ) -> "Customer":
        customer = cls.__new__(cls)
        customer._id = id
        customer._name = name
        customer._email = email
        customer._phone = phone
        customer._address = address
        customer._created_at = created_at
        return customer

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Email:
        return self._email

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def address(self) -> str:
        return self._address

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def update_profile(
        self,
        name: Optional[str] = None,
        email: Optional[Email] = None,
        phone: Optional[Phone] = None,
        address: Optional[str] = None,
    ) -> None:
        """Apply only the fields that were provided"""
        if name is not None:
            self.update_name(name)
        if email is not None:
            self.update_email(email)
        if phone is not None:
            self.update_phone(phone)
        if address is not None:
            self.update_address(address)

    def update_name(self, name: str) -> None:
        _validate_required(name, "Name")
        self._name = name

    def update_email(self, email: Email) -> None:
        if email is None:
            raise DomainValidationError("Email is required.")
        self._email = email

    def update_phone(self, phone: Phone) -> None:
        if phone is None:
            raise DomainValidationError("Phone is required.")
        self._phone = phone

    def update_address(self, address: str) -> None:
        _validate_required(address, "Address")
        self._address = address

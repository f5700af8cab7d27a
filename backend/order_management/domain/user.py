"""
User Entity - API operators that log in and carry a role
"""
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from order_management.core.exceptions import DomainValidationError
from order_management.domain.order import utc_now
from order_management.domain.value_objects import Email


class UserRole(str, Enum):
    ADMIN = "Admin"
    USER = "User"

    @classmethod
    def parse(cls, raw: str) -> Optional["UserRole"]:
        if raw is None:
            return None
        return next((role for role in cls if role.value.lower() == raw.strip().lower()), None)


class User:
    def __init__(self, name: str, email: Email, password_hash: str, role: UserRole = UserRole.USER):
        if name is None or not name.strip():
            raise DomainValidationError("Name is required.", {"field": "name"})
        if email is None:
            raise DomainValidationError("Email is required.", {"field": "email"})
        if not password_hash:
            raise DomainValidationError("Password is required.", {"field": "password"})

        self._id = uuid4()
        self._name = name
        self._email = email
        self._password_hash = password_hash
        self._role = UserRole(role)
        self._created_at = utc_now()

    @classmethod
    def rehydrate(
        cls,
        id: UUID,
        name: str,
        email: Email,
        password_hash: str,
        role: UserRole,
        created_at: datetime,
    ) -> "User":
        user = cls.__new__(cls)
        user._id = id
        user._name = name
        user._email = email
        user._password_hash = password_hash
        user._role = UserRole(role)
        user._created_at = created_at
        return user

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
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def update_name(self, name: str) -> None:
        if name is None or not name.strip():
            raise DomainValidationError("Name is required.", {"field": "name"})
        self._name = name

    def update_email(self, email: Email) -> None:
        if email is None:
            raise DomainValidationError("Email is required.", {"field": "email"})
        self._email = email

    def change_password(self, password_hash: str) -> None:
        """Takes an already hashed password"""
        if not password_hash:
            raise DomainValidationError("Password is required.", {"field": "password"})
        self._password_hash = password_hash

    def update_role(self, role: UserRole) -> None:
        self._role = UserRole(role)

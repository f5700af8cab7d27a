"""
User Service - API user management (admin only at the HTTP layer)

The first Admin is created by seed_admin at startup when the users table is
empty; every later account is managed by an Admin through the API.
"""
from typing import List, Optional, Sequence
from uuid import UUID

from order_management.core.exceptions import DomainValidationError, NotFoundError, RequestShapeError
from order_management.core.security import PasswordHasher
from order_management.domain.user import User, UserRole
from order_management.domain.value_objects import Email
from order_management.repositories.interfaces import UserStore
from order_management.schemas.auth import PASSWORD_MIN_LENGTH, UserCreate, UserResponse, UserUpdate
from order_management.services.common import value_for_update
from order_management.services.observers import LoggingObserver, ServiceObserver, observed


class UserService:

    def __init__(
        self,
        repository: UserStore,
        password_hasher: PasswordHasher,
        observers: Optional[Sequence[ServiceObserver]] = None,
    ):
        self.repository = repository
        self.password_hasher = password_hasher
        self.observers = list(observers) if observers is not None else [LoggingObserver()]

    @observed("user.create")
    def create(self, request: UserCreate) -> UserResponse:
        role = self._parse_role(request.role or UserRole.USER.value)
        email = Email.create(request.email)
        self._ensure_email_available(email)

        user = User(request.name, email, self.password_hasher.hash(request.password), role)
        self.repository.add(user)
        return UserResponse.from_domain(user)

    @observed("user.update")
    def update(self, user_id: UUID, request: UserUpdate) -> UserResponse:
        """
        Apply a partial update

        Blank fields are ignored. Every provided field is validated before
        the user is changed.
        """
        user = self._get_user(user_id)

        name = value_for_update(request.name)
        raw_email = value_for_update(request.email)
        password = value_for_update(request.password)
        raw_role = value_for_update(request.role)

        role = self._parse_role(raw_role) if raw_role is not None else None
        email = Email.create(raw_email) if raw_email is not None else None
        if email is not None:
            self._ensure_email_available(email, user_id=user.id)
        if password is not None:
            self._check_password(password)

        if name is not None:
            user.update_name(name)
        if email is not None:
            user.update_email(email)
        if password is not None:
            user.change_password(self.password_hasher.hash(password))
        if role is not None:
            user.update_role(role)

        self.repository.update(user)
        return UserResponse.from_domain(user)

    @observed("user.delete")
    def delete(self, user_id: UUID) -> bool:
        self._get_user(user_id)
        self.repository.delete(user_id)
        return True

    @observed("user.get")
    def get_by_id(self, user_id: UUID) -> UserResponse:
        return UserResponse.from_domain(self._get_user(user_id))

    @observed("user.list")
    def get_all(self) -> List[UserResponse]:
        return [UserResponse.from_domain(u) for u in self.repository.find_all()]

    @observed("user.seed_admin")
    def seed_admin(self, name: str, email: str, password: str) -> Optional[UserResponse]:
        """
        Create the first Admin when no user exists yet

        Returns None (and changes nothing) when the users table is not empty.
        """
        if self.repository.find_all():
            return None

        self._check_password(password)
        user = User(name, Email.create(email), self.password_hasher.hash(password), UserRole.ADMIN)
        self.repository.add(user)
        return UserResponse.from_domain(user)

    def _get_user(self, user_id: UUID) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def _ensure_email_available(self, email: Email, user_id: Optional[UUID] = None) -> None:
        existing = self.repository.find_by_email(email.value)
        if existing is not None and existing.id != user_id:
            raise DomainValidationError("Email is already registered.", {"field": "email"})

    @staticmethod
    def _parse_role(raw: str) -> UserRole:
        role = UserRole.parse(raw)
        if role is None:
            raise RequestShapeError("Invalid user role.", field="role")
        return role

    @staticmethod
    def _check_password(password: str) -> None:
        if len(password) < PASSWORD_MIN_LENGTH:
            raise DomainValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters.", {"field": "password"}
            )

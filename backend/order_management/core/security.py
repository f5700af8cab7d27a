"""
Password hashing and access token issuing
"""
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt
from passlib.context import CryptContext

from order_management.domain.user import User

JWT_ALGORITHM = "HS256"


class AuthConfig:
    """Authentication configuration"""

    @staticmethod
    def get_auth_secret() -> str:
        """Get the AUTH_SECRET from environment"""
        secret = os.getenv("AUTH_SECRET")
        if not secret:
            raise ValueError("AUTH_SECRET environment variable is not set")
        return secret

    @staticmethod
    def get_jwt_algorithm() -> str:
        return JWT_ALGORITHM


class PasswordHasher:
    """bcrypt password hashing"""

    def __init__(self):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        return self._context.verify(password, password_hash)


class AccessTokenGenerator:
    """
    Issues HS256 JWTs for authenticated users

    Payload:
    {
        "sub": "<user id>",
        "email": "admin@example.com",
        "role": "Admin",
        "iat": 1234567890,
        "exp": 1234571490
    }
    """

    def __init__(self, expiration_minutes: int, signing_key: str):
        self.expiration_minutes = expiration_minutes
        self._signing_key = signing_key

    @property
    def expires_in_seconds(self) -> int:
        return self.expiration_minutes * 60

    def generate(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email.value,
            "role": user.role.value,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self.expiration_minutes)).timestamp()),
        }
        return jwt.encode(claims, self._signing_key, algorithm=JWT_ALGORITHM)

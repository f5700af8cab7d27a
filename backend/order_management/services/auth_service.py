"""
Auth Service - exchanges credentials for an access token
"""
from typing import Optional, Sequence

from order_management.core.exceptions import AuthenticationError
from order_management.core.security import AccessTokenGenerator, PasswordHasher
from order_management.repositories.interfaces import UserStore
from order_management.schemas.auth import LoginRequest, TokenResponse
from order_management.services.observers import LoggingObserver, ServiceObserver, observed

INVALID_CREDENTIALS = "Invalid credentials."


class AuthService:

    def __init__(
        self,
        user_repository: UserStore,
        token_generator: AccessTokenGenerator,
        password_hasher: PasswordHasher,
        observers: Optional[Sequence[ServiceObserver]] = None,
    ):
        self.user_repository = user_repository
        self.token_generator = token_generator
        self.password_hasher = password_hasher
        self.observers = list(observers) if observers is not None else [LoggingObserver()]

    @observed("auth.login")
    def login(self, request: LoginRequest) -> TokenResponse:
        """
        Raises:
            AuthenticationError: unknown email or wrong password (same message
                for both)
        """
        user = self.user_repository.find_by_email(request.email)
        if user is None:
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not self.password_hasher.verify(request.password, user.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return TokenResponse(
            access_token=self.token_generator.generate(user),
            expires_in=self.token_generator.expires_in_seconds,
        )

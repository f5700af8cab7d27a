"""
Authentication dependencies for the Order Management API
Validates JWT bearer tokens and provides user context
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from order_management.core.security import AuthConfig

# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)

# Role hierarchy: Admin > User
ROLE_LEVELS = {
    "Admin": 2,
    "User": 1,
}


class TokenUser(BaseModel):
    """User data extracted from JWT token"""
    id: str
    email: str
    role: str = "User"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_access_token(token: str) -> dict:
    """
    Decode and validate an access token issued by AccessTokenGenerator

    Raises:
        HTTPException 401 if the token is expired or invalid
    """
    try:
        return jwt.decode(
            token,
            AuthConfig.get_auth_secret(),
            algorithms=[AuthConfig.get_jwt_algorithm()],
        )
    except ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except JWTError as e:
        raise _unauthorized(f"Invalid token: {str(e)}")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenUser:
    """
    Dependency that extracts and validates the current user from JWT.

    Usage:
        @router.get("/protected")
        async def protected_route(user: TokenUser = Depends(get_current_user)):
            return {"message": f"Hello {user.email}"}
    """
    if not credentials:
        raise _unauthorized("Authentication required")

    payload = decode_access_token(credentials.credentials)

    user_id = payload.get("sub")
    email = payload.get("email")

    if not user_id or not email:
        raise _unauthorized("Invalid token payload: missing user id or email")

    return TokenUser(
        id=user_id,
        email=email,
        role=payload.get("role", "User"),
    )


def require_role(required_role: str):
    """
    Dependency factory for role-based access control.

    Usage:
        @router.delete("/orders/{order_id}")
        async def delete_order(
            order_id: UUID,
            user: TokenUser = Depends(require_role("Admin"))
        ):
            # Only admins can delete orders
            pass
    """
    async def role_checker(
        user: TokenUser = Depends(get_current_user)
    ) -> TokenUser:
        user_level = ROLE_LEVELS.get(user.role, 0)
        required_level = ROLE_LEVELS.get(required_role, 0)

        if user_level < required_level:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required role: {required_role}, your role: {user.role}"
            )

        return user

    return role_checker


# Convenience dependencies for common role requirements
require_admin = require_role("Admin")
require_user = require_role("User")

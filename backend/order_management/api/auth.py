"""
Authentication API endpoints
- Login (public)
- User management (admin only)
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from order_management.api.dependencies import get_auth_service, get_user_service
from order_management.core.auth import TokenUser, get_current_user, require_admin
from order_management.schemas.auth import LoginRequest, TokenResponse, UserCreate, UserResponse, UserUpdate
from order_management.services.auth_service import AuthService
from order_management.services.user_service import UserService

router = APIRouter()


@router.post("/auth/login", response_model=TokenResponse)
async def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Exchange email and password for a bearer token"""
    return service.login(request)


@router.get("/auth/me", response_model=TokenUser)
async def get_me(user: TokenUser = Depends(get_current_user)):
    """Get the user behind the current token"""
    return user


# =============================================================================
# User Management Endpoints (Admin Only)
# =============================================================================

@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreate,
    service: UserService = Depends(get_user_service),
    user: TokenUser = Depends(require_admin),
):
    return service.create(request)


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    service: UserService = Depends(get_user_service),
    user: TokenUser = Depends(require_admin),
):
    return service.get_all()


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
    user: TokenUser = Depends(require_admin),
):
    return service.get_by_id(user_id)


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UserUpdate,
    service: UserService = Depends(get_user_service),
    user: TokenUser = Depends(require_admin),
):
    """Update only the fields that are provided; a new password is rehashed"""
    return service.update(user_id, request)


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: UUID,
    service: UserService = Depends(get_user_service),
    user: TokenUser = Depends(require_admin),
):
    deleted = service.delete(user_id)
    return {"status": "success", "deleted": deleted}

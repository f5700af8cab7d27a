"""
Customers API Endpoints
Any authenticated user can read; changes require the Admin role.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from order_management.api.dependencies import get_customer_service
from order_management.core.auth import TokenUser, require_admin, require_user
from order_management.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from order_management.services.customer_service import CustomerService

router = APIRouter()


@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
    user: TokenUser = Depends(require_admin),
):
    return service.create(request)


@router.get("/", response_model=List[CustomerResponse])
async def get_customers(
    service: CustomerService = Depends(get_customer_service),
    user: TokenUser = Depends(require_user),
):
    return service.get_all()


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
    user: TokenUser = Depends(require_user),
):
    return service.get_by_id(customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: UUID,
    request: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
    user: TokenUser = Depends(require_admin),
):
    """Update only the fields that are provided"""
    return service.update(customer_id, request)


@router.delete("/{customer_id}")
async def delete_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
    user: TokenUser = Depends(require_admin),
):
    deleted = service.delete(customer_id)
    return {"status": "success", "deleted": deleted}

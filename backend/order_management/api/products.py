"""
Products API Endpoints
Catalog reads are public; changes require the Admin role.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from order_management.api.dependencies import get_product_service
from order_management.core.auth import TokenUser, require_admin
from order_management.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from order_management.services.product_service import ProductService

router = APIRouter()


@router.post("/", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreate,
    service: ProductService = Depends(get_product_service),
    user: TokenUser = Depends(require_admin),
):
    return service.create(request)


@router.get("/", response_model=List[ProductResponse])
async def get_products(service: ProductService = Depends(get_product_service)):
    return service.get_all()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    return service.get_by_id(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    request: ProductUpdate,
    service: ProductService = Depends(get_product_service),
    user: TokenUser = Depends(require_admin),
):
    return service.update(product_id, request)


@router.delete("/{product_id}")
async def delete_product(
    product_id: UUID,
    service: ProductService = Depends(get_product_service),
    user: TokenUser = Depends(require_admin),
):
    deleted = service.delete(product_id)
    return {"status": "success", "deleted": deleted}

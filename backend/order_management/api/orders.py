"""
Orders API Endpoints
Reads are public; create, update and delete require the Admin role.

Author: TM3
Date: 2025-10-17
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from order_management.api.dependencies import get_order_service
from order_management.core.auth import TokenUser, require_admin
from order_management.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from order_management.services.order_service import OrderService

router = APIRouter()


@router.post("/", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: OrderCreate,
    service: OrderService = Depends(get_order_service),
    user: TokenUser = Depends(require_admin),
):
    """
    Create an order

    Customer and every product must exist; the order starts as Pending.
    """
    return service.create(request)


@router.get("/", response_model=List[OrderResponse])
async def get_orders(service: OrderService = Depends(get_order_service)):
    """Get all orders (empty list when there are none)"""
    return service.get_all()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: UUID, service: OrderService = Depends(get_order_service)):
    """Get a single order with its items"""
    return service.get_by_id(order_id)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: UUID,
    request: OrderUpdate,
    service: OrderService = Depends(get_order_service),
    user: TokenUser = Depends(require_admin),
):
    """
    Update an order

    - customer_id is required
    - status: Paid, Shipped or Cancelled (case-insensitive); Pending is rejected
    - items: per product, omitted quantity/unit_price keep their current value
    """
    return service.update(order_id, request)


@router.delete("/{order_id}")
async def delete_order(
    order_id: UUID,
    service: OrderService = Depends(get_order_service),
    user: TokenUser = Depends(require_admin),
):
    """Delete an order and its items"""
    deleted = service.delete(order_id)
    return {"status": "success", "deleted": deleted}

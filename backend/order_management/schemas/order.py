"""
Order request and response schemas

Update schemas use Optional fields: a field left out (or null) means
"keep the current value".

Author: TM3
Date: 2025-10-17
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from order_management.domain.order import Order, OrderItem


class OrderItemCreate(BaseModel):
    """One requested line; quantity and price rules are enforced by the Order aggregate"""
    product_id: UUID = Field(..., description="Product ID")
    quantity: int = Field(..., description="Units ordered")
    unit_price: Decimal = Field(..., description="Price per unit")


class OrderCreate(BaseModel):
    """Schema for creating a new order"""
    customer_id: UUID = Field(..., description="Customer placing the order")
    items: List[OrderItemCreate] = Field(..., min_length=1, description="Order lines")


class OrderItemUpdate(BaseModel):
    """Changes to an existing line, matched by product_id"""
    product_id: Optional[UUID] = None
    quantity: Optional[int] = None
    unit_price: Optional[Decimal] = None


class OrderUpdate(BaseModel):
    """Schema for updating an existing order"""
    customer_id: Optional[UUID] = None
    status: Optional[str] = Field(None, max_length=50, description="Pending, Paid, Shipped or Cancelled")
    items: Optional[List[OrderItemUpdate]] = None


class OrderItemResponse(BaseModel):
    """Order line projection"""

    id: UUID
    order_id: UUID
    product_id: UUID
    quantity: int
    unit_price: Decimal
    line_total: Decimal

    model_config = ConfigDict(from_attributes=True)

    @field_serializer('unit_price', 'line_total')
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(
            id=item.id,
            order_id=item.order_id,
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_total=item.line_total,
        )


class OrderResponse(BaseModel):
    """
    Order projection returned by the API

    Fields:
        id: Order ID
        customer_id: Customer reference
        status: Display string (Pending, Paid, Shipped, Cancelled)
        total_amount: Sum of line totals
        created_at: Creation timestamp
        paid_at: Payment timestamp, if the order was ever paid
        items: Order lines
    """

    id: UUID
    customer_id: UUID
    status: str
    total_amount: Decimal
    created_at: datetime
    paid_at: Optional[datetime] = None
    items: List[OrderItemResponse] = Field(default_factory=list)

    @field_serializer('total_amount')
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            status=order.status.display_name,
            total_amount=order.total_amount,
            created_at=order.created_at,
            paid_at=order.paid_at,
            items=[OrderItemResponse.from_domain(item) for item in order.items],
        )

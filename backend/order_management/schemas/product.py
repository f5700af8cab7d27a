"""
Product request and response schemas
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer

from order_management.domain.product import Product


class ProductCreate(BaseModel):
    """Schema for creating a product"""
    name: str = Field(..., max_length=255)
    sku: str = Field(..., max_length=100)
    price: Decimal
    stock_quantity: int = 0
    is_active: bool = True


class ProductUpdate(BaseModel):
    """Schema for updating a product"""
    name: Optional[str] = Field(None, max_length=255)
    sku: Optional[str] = Field(None, max_length=100)
    price: Optional[Decimal] = None
    stock_quantity: Optional[int] = None


class ProductResponse(BaseModel):
    id: UUID
    name: str
    sku: str
    price: Decimal
    stock_quantity: int
    is_active: bool
    created_at: datetime

    @field_serializer('price')
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            sku=product.sku,
            price=product.price,
            stock_quantity=product.stock_quantity,
            is_active=product.is_active,
            created_at=product.created_at,
        )

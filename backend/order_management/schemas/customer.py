"""
Customer request and response schemas
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from order_management.domain.customer import Customer


class CustomerCreate(BaseModel):
    """Schema for creating a customer; email and phone are validated by their value objects"""
    name: str = Field(..., max_length=255)
    email: str = Field(..., description="E-mail address")
    phone: str = Field(..., description="13 digits, e.g. 5511999999999")
    address: str


class CustomerUpdate(BaseModel):
    """Schema for updating a customer; empty strings are treated as absent"""
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class CustomerResponse(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str
    address: str
    created_at: datetime

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email.value,
            phone=customer.phone.value,
            address=customer.address,
            created_at=customer.created_at,
        )

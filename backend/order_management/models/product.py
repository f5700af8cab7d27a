"""
Product table
"""
import uuid

from sqlalchemy import Boolean, Column, DateTime, DECIMAL, Integer, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from order_management.core.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    sku = Column(String(100), nullable=False, index=True)
    price = Column(DECIMAL(12, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    order_items = relationship("OrderItem", back_populates="product")

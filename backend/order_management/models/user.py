"""
User table (API operators)
"""
import uuid

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.sql import func

from order_management.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="User")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

"""
Application exceptions

Every error the domain or service layer raises on purpose derives from
ApplicationError. The API layer maps each family to an HTTP status in
order_management.main; anything outside this hierarchy is a genuine failure
and is left to propagate.

Author: TM3
Date: 2025-10-17
"""
from enum import Enum
from typing import Any, Dict, Optional


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DomainValidationError(ApplicationError):
    """Raised by entities and aggregates when an invariant would be violated"""


class ValidationErrorKind(str, Enum):
    REQUIRED = "Required"
    INVALID_FORMAT = "InvalidFormat"


class ValidationError(DomainValidationError):
    """Raised by value objects when the raw input is missing or malformed"""

    def __init__(self, message: str, kind: ValidationErrorKind, field: Optional[str] = None):
        details: Dict[str, Any] = {"kind": kind.value}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.kind = kind
        self.field = field


class NotFoundError(ApplicationError):
    """Raised when the entity an operation targets does not exist"""

    def __init__(self, entity: str, entity_id: Any, message: Optional[str] = None):
        msg = message or f"{entity} with id: {entity_id} was not found."
        super().__init__(msg, {"entity": entity, "entity_id": str(entity_id)})
        self.entity = entity
        self.entity_id = entity_id


class MissingReferenceError(ApplicationError):
    """Raised when a request references a customer or product that does not exist"""

    def __init__(self, entity: str, entity_id: Any, message: Optional[str] = None):
        msg = message or f"{entity} with id {entity_id} does not exist."
        super().__init__(msg, {"entity": entity, "entity_id": str(entity_id)})
        self.entity = entity
        self.entity_id = entity_id


class RequestShapeError(ApplicationError):
    """Raised when a request is malformed at the service boundary"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, {"field": field} if field else {})
        self.field = field


class AuthenticationError(ApplicationError):
    """Raised when login credentials do not match a user"""

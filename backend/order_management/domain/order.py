"""
Order Aggregate

Order is the aggregate root and OrderItem the line entity it owns. Both
expose read-only properties; the only way to change an order is through its
named operations (add_item, update_item, remove_item, mark_as_paid,
mark_as_shipped, mark_as_cancelled), which enforce:

- total_amount is always the sum of the current line totals, recomputed from
  the item collection after every change (never adjusted incrementally)
- items can only change while the order is Pending
- status follows Pending -> Paid -> Shipped, with Pending|Paid -> Cancelled;
  Shipped and Cancelled are final

Author: TM3
Date: 2025-10-17
"""
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple
from uuid import UUID, uuid4

from order_management.core.exceptions import DomainValidationError

ZERO = Decimal("0")
PRICE_EXPONENT = -2


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, Enum):
    """Lifecycle state of an order; the value is the display string"""

    PENDING = "Pending"
    PAID = "Paid"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"

    @property
    def display_name(self) -> str:
        return self.value

    def is_final(self) -> bool:
        return self in (OrderStatus.SHIPPED, OrderStatus.CANCELLED)

    @classmethod
    def parse(cls, raw: str) -> Optional["OrderStatus"]:
        """
        Case-insensitive lookup of a status string

        Returns None when the string does not name a status.
        """
        if raw is None:
            return None
        return _STATUS_BY_NAME.get(raw.strip().lower())


# Explicit wire mapping: lower-cased display string -> status
_STATUS_BY_NAME: Dict[str, OrderStatus] = {status.value.lower(): status for status in OrderStatus}


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # str() avoids binary float artefacts (0.1 -> 0.1000000000000000055...)
        return Decimal(str(value))
    return Decimal(value)


def _validate_line(quantity: int, unit_price: Decimal) -> None:
    # bool is an int subclass
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
        raise DomainValidationError("Quantity must be at least 1.", {"quantity": str(quantity)})
    if unit_price is None or not unit_price.is_finite() or unit_price <= ZERO:
        raise DomainValidationError(
            "UnitPrice must be greater than 0.", {"unit_price": str(unit_price)}
        )
    # Prices are stored as DECIMAL(12, 2)
    if unit_price.normalize().as_tuple().exponent < PRICE_EXPONENT:
        raise DomainValidationError(
            "UnitPrice must have at most 2 decimal places.", {"unit_price": str(unit_price)}
        )


class OrderItem:
    """A single order line. Created and changed only by its Order."""

    __slots__ = ("_id", "_order_id", "_product_id", "_quantity", "_unit_price", "_line_total")

    def __init__(self, order_id: UUID, product_id: UUID, quantity: int, unit_price: Decimal):
        unit_price = _as_decimal(unit_price)
        _validate_line(quantity, unit_price)

        self._id = uuid4()
        self._order_id = order_id
        self._product_id = product_id
        self._quantity = quantity
        self._unit_price = unit_price
        self._line_total = quantity * unit_price

    @classmethod
    def rehydrate(
        cls,
        id: UUID,
        order_id: UUID,
        product_id: UUID,
        quantity: int,
        unit_price: Decimal,
    ) -> "OrderItem":
        """Rebuild a persisted line without generating a new identity"""
        item = cls.__new__(cls)
        item._id = id
        item._order_id = order_id
        item._product_id = product_id
        item._quantity = quantity
        item._unit_price = _as_decimal(unit_price)
        item._line_total = quantity * item._unit_price
        return item

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def order_id(self) -> UUID:
        return self._order_id

    @property
    def product_id(self) -> UUID:
        return self._product_id

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def unit_price(self) -> Decimal:
        return self._unit_price

    @property
    def line_total(self) -> Decimal:
        return self._line_total

    def _change(self, quantity: int, unit_price: Decimal) -> None:
        self._quantity = quantity
        self._unit_price = unit_price
        self._line_total = quantity * unit_price

    def __repr__(self) -> str:
        return (
            f"OrderItem(product_id={self._product_id}, quantity={self._quantity}, "
            f"unit_price={self._unit_price})"
        )


class Order:
    """
    Order aggregate root

    Attributes (read-only):
        id: Generated order ID
        customer_id: Customer reference, fixed at creation
        status: Current OrderStatus
        total_amount: Sum of line totals
        created_at: Creation timestamp (UTC)
        paid_at: When the order was paid; kept if the order is later cancelled
        items: Lines in insertion order
    """

    def __init__(self, customer_id: UUID):
        if not customer_id or (isinstance(customer_id, UUID) and customer_id.int == 0):
            raise DomainValidationError("CustomerId is required.", {"customer_id": customer_id})

        self._id = uuid4()
        self._customer_id = customer_id
        self._status = OrderStatus.PENDING
        self._created_at = utc_now()
        self._paid_at: Optional[datetime] = None
        self._items: List[OrderItem] = []
        self._total_amount = ZERO

    @classmethod
    def rehydrate(
        cls,
        id: UUID,
        customer_id: UUID,
        status: OrderStatus,
        created_at: datetime,
        paid_at: Optional[datetime],
        items: Iterable[OrderItem],
    ) -> "Order":
        """Rebuild a persisted order as-is, bypassing transition rules"""
        order = cls.__new__(cls)
        order._id = id
        order._customer_id = customer_id
        order._status = OrderStatus(status)
        order._created_at = created_at
        order._paid_at = paid_at
        order._items = list(items)
        order._recalculate_total()
        return order

    # Read accessors

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def customer_id(self) -> UUID:
        return self._customer_id

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def total_amount(self) -> Decimal:
        return self._total_amount

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def paid_at(self) -> Optional[datetime]:
        return self._paid_at

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    def find_item(self, product_id: UUID) -> Optional[OrderItem]:
        """First line for the product, or None"""
        return next((item for item in self._items if item.product_id == product_id), None)

    # Item operations

    def add_item(self, product_id: UUID, quantity: int, unit_price: Decimal) -> OrderItem:
        self._ensure_pending()
        item = OrderItem(self._id, product_id, quantity, unit_price)
        self._items.append(item)
        self._recalculate_total()
        return item

    def update_item(self, product_id: UUID, quantity: int, unit_price: Decimal) -> OrderItem:
        self._ensure_pending()
        unit_price = _as_decimal(unit_price)
        _validate_line(quantity, unit_price)

        item = self._require_item(product_id)
        item._change(quantity, unit_price)
        self._recalculate_total()
        return item

    def remove_item(self, product_id: UUID) -> None:
        self._ensure_pending()
        item = self._require_item(product_id)
        self._items.remove(item)
        self._recalculate_total()

    # Status transitions

    def mark_as_paid(self) -> None:
        if self._status == OrderStatus.CANCELLED:
            raise DomainValidationError("Cannot pay a cancelled order.")
        if self._status == OrderStatus.SHIPPED:
            raise DomainValidationError("Cannot pay a shipped order.")
        if self._status == OrderStatus.PAID:
            raise DomainValidationError("Order is already paid.")
        if not self._items:
            raise DomainValidationError("Cannot pay an order without items.")

        self._status = OrderStatus.PAID
        self._paid_at = utc_now()

    def mark_as_shipped(self) -> None:
        if self._status != OrderStatus.PAID:
            raise DomainValidationError(
                "Only paid orders can be shipped.", {"status": self._status.value}
            )
        if not self._items:
            raise DomainValidationError("Cannot ship an order without items.")

        self._status = OrderStatus.SHIPPED

    def mark_as_cancelled(self) -> None:
        if self._status == OrderStatus.SHIPPED:
            raise DomainValidationError("Cannot cancel a shipped order.")
        if self._status == OrderStatus.CANCELLED:
            raise DomainValidationError("Order is already cancelled.")

        # paid_at is retained
        self._status = OrderStatus.CANCELLED

    # Internals

    def _ensure_pending(self) -> None:
        if self._status != OrderStatus.PENDING:
            raise DomainValidationError(
                "Cannot modify items of a non-pending order.", {"status": self._status.value}
            )

    def _require_item(self, product_id: UUID) -> OrderItem:
        item = self.find_item(product_id)
        if item is None:
            raise DomainValidationError(
                f"Item with product id {product_id} not found.", {"product_id": str(product_id)}
            )
        return item

    def _recalculate_total(self) -> None:
        self._total_amount = sum((item.line_total for item in self._items), ZERO)

    def __repr__(self) -> str:
        return f"Order(id={self._id}, status={self._status.value}, total={self._total_amount})"

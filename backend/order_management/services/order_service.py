"""
Order Service

Turns create/update requests into Order aggregate operations after checking
that every referenced customer and product exists. The service never touches
an order's fields directly: items and status only change through the
aggregate's own methods, and aggregate errors propagate unchanged.

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional, Sequence
from uuid import UUID

from order_management.core.exceptions import (
    DomainValidationError,
    MissingReferenceError,
    NotFoundError,
    RequestShapeError,
)
from order_management.domain.order import Order, OrderStatus
from order_management.repositories.interfaces import CustomerLookup, OrderStore, ProductLookup
from order_management.schemas.order import OrderCreate, OrderItemUpdate, OrderResponse, OrderUpdate
from order_management.services.observers import LoggingObserver, ServiceObserver, observed


class OrderService:
    """
    Orchestrates the Order aggregate

    Handles:
    - Customer and product existence checks
    - Status strings -> aggregate transitions
    - Partial item updates ("if present, overwrite; if absent, retain")
    - Persistence through the order repository
    """

    def __init__(
        self,
        order_repository: OrderStore,
        customer_repository: CustomerLookup,
        product_repository: ProductLookup,
        observers: Optional[Sequence[ServiceObserver]] = None,
    ):
        self.order_repository = order_repository
        self.customer_repository = customer_repository
        self.product_repository = product_repository
        self.observers = list(observers) if observers is not None else [LoggingObserver()]

    @observed("order.create")
    def create(self, request: OrderCreate) -> OrderResponse:
        """
        Create an order with its items

        All product references are checked before the order is built, so a
        missing product never leaves a half-built order behind.

        Raises:
            MissingReferenceError: customer or a product does not exist
            DomainValidationError: a line has an invalid quantity or price
        """
        self._require_customer(request.customer_id)
        for item in request.items:
            self._require_product(item.product_id)

        order = Order(request.customer_id)
        for item in request.items:
            order.add_item(item.product_id, item.quantity, item.unit_price)

        self.order_repository.add(order)
        return OrderResponse.from_domain(order)

    @observed("order.update")
    def update(self, order_id: UUID, request: OrderUpdate) -> OrderResponse:
        """
        Apply a partial update to an order

        Order of checks: customer_id present and existing, every item entry
        has an existing product, the order exists. Then the status change is
        applied, followed by the item changes.

        Raises:
            RequestShapeError: customer_id missing, item without product_id,
                or an unknown status string
            MissingReferenceError: customer, product or order line missing
            NotFoundError: the order does not exist
            DomainValidationError: the aggregate refused the change
        """
        if request.customer_id is None:
            raise RequestShapeError("CustomerId is required to update an order.", field="customer_id")

        self._require_customer(request.customer_id)
        self._validate_item_products(request.items)

        order = self._get_order(order_id)

        self._apply_status(order, request.status)
        self._apply_item_changes(order, request.items)

        self.order_repository.update(order)
        return OrderResponse.from_domain(order)

    @observed("order.delete")
    def delete(self, order_id: UUID) -> bool:
        self._get_order(order_id)
        self.order_repository.delete(order_id)
        return True

    @observed("order.get")
    def get_by_id(self, order_id: UUID) -> OrderResponse:
        return OrderResponse.from_domain(self._get_order(order_id))

    @observed("order.list")
    def get_all(self) -> List[OrderResponse]:
        return [OrderResponse.from_domain(order) for order in self.order_repository.find_all()]

    # Reference checks

    def _require_customer(self, customer_id: UUID) -> None:
        if self.customer_repository.find_by_id(customer_id) is None:
            raise MissingReferenceError("Customer", customer_id)

    def _require_product(self, product_id: UUID) -> None:
        if self.product_repository.find_by_id(product_id) is None:
            raise MissingReferenceError("Product", product_id)

    def _validate_item_products(self, items: Optional[List[OrderItemUpdate]]) -> None:
        if items is None:
            return

        for item in items:
            if item.product_id is None:
                raise RequestShapeError(
                    "ProductId is required to update an order item.", field="items.product_id"
                )
            self._require_product(item.product_id)

    def _get_order(self, order_id: UUID) -> Order:
        order = self.order_repository.find_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    # Mutations

    @staticmethod
    def _apply_status(order: Order, raw_status: Optional[str]) -> None:
        if raw_status is None or not raw_status.strip():
            return

        status = OrderStatus.parse(raw_status)
        if status is None:
            raise RequestShapeError("Invalid order status.", field="status")

        if status == OrderStatus.PENDING:
            raise DomainValidationError("Cannot change order back to Pending status.")
        elif status == OrderStatus.PAID:
            order.mark_as_paid()
        elif status == OrderStatus.SHIPPED:
            order.mark_as_shipped()
        elif status == OrderStatus.CANCELLED:
            order.mark_as_cancelled()

    @staticmethod
    def _apply_item_changes(order: Order, items: Optional[List[OrderItemUpdate]]) -> None:
        if items is None:
            return

        for change in items:
            existing = order.find_item(change.product_id)
            if existing is None:
                raise MissingReferenceError(
                    "OrderItem",
                    change.product_id,
                    message=f"Product {change.product_id} not found in order.",
                )

            quantity = change.quantity if change.quantity is not None else existing.quantity
            unit_price = change.unit_price if change.unit_price is not None else existing.unit_price
            order.update_item(change.product_id, quantity, unit_price)

"""
Unit tests for the Order aggregate

Author: TM3
Date: 2025-10-17
"""
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from order_management.core.exceptions import DomainValidationError
from order_management.domain.order import Order, OrderItem, OrderStatus


def order_in_status(status: OrderStatus) -> Order:
    """Build an order with one line and walk it to the requested status"""
    order = Order(uuid4())
    order.add_item(uuid4(), 1, Decimal("10.00"))
    if status == OrderStatus.PAID:
        order.mark_as_paid()
    elif status == OrderStatus.SHIPPED:
        order.mark_as_paid()
        order.mark_as_shipped()
    elif status == OrderStatus.CANCELLED:
        order.mark_as_cancelled()
    return order


def snapshot(order: Order):
    return (
        order.status,
        order.total_amount,
        order.paid_at,
        [(i.product_id, i.quantity, i.unit_price, i.line_total) for i in order.items],
    )


class TestOrderCreation:

    def test_new_order_is_pending_and_empty(self):
        customer_id = uuid4()

        order = Order(customer_id)

        assert isinstance(order.id, UUID)
        assert order.customer_id == customer_id
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Decimal("0")
        assert order.items == ()
        assert order.paid_at is None
        assert order.created_at.tzinfo is not None

    @pytest.mark.parametrize("customer_id", [None, UUID(int=0)])
    def test_missing_customer_is_rejected(self, customer_id):
        with pytest.raises(DomainValidationError, match="CustomerId is required."):
            Order(customer_id)

    def test_each_order_gets_its_own_id(self):
        assert Order(uuid4()).id != Order(uuid4()).id


class TestOrderItems:

    def test_total_follows_every_item_change(self):
        # Arrange
        order = Order(uuid4())
        p1, p2 = uuid4(), uuid4()

        # Act / Assert
        order.add_item(p1, 2, Decimal("10.00"))
        order.add_item(p2, 1, Decimal("15.00"))
        assert order.total_amount == Decimal("35.00")

        order.remove_item(p1)
        assert order.total_amount == Decimal("15.00")
        assert [item.product_id for item in order.items] == [p2]

    def test_line_total_is_quantity_times_price(self):
        order = Order(uuid4())

        item = order.add_item(uuid4(), 3, Decimal("2.50"))

        assert isinstance(item, OrderItem)
        assert item.order_id == order.id
        assert item.line_total == Decimal("7.50")

    def test_float_price_is_converted_without_artefacts(self):
        order = Order(uuid4())

        item = order.add_item(uuid4(), 3, 0.1)

        assert item.unit_price == Decimal("0.1")
        assert order.total_amount == Decimal("0.3")

    def test_update_item_recomputes_total(self):
        order = Order(uuid4())
        product_id = uuid4()
        order.add_item(product_id, 2, Decimal("10.00"))

        order.update_item(product_id, 5, Decimal("4.00"))

        assert order.items[0].quantity == 5
        assert order.items[0].line_total == Decimal("20.00")
        assert order.total_amount == Decimal("20.00")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_add_item_rejects_non_positive_quantity(self, quantity):
        order = Order(uuid4())

        with pytest.raises(DomainValidationError, match="Quantity must be at least 1."):
            order.add_item(uuid4(), quantity, Decimal("10.00"))

        assert order.items == ()

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
    def test_add_item_rejects_non_positive_price(self, price):
        order = Order(uuid4())

        with pytest.raises(DomainValidationError, match="UnitPrice must be greater than 0."):
            order.add_item(uuid4(), 1, price)

    @pytest.mark.parametrize("quantity", [1.5, "2", True, None])
    def test_add_item_rejects_non_integer_quantity(self, quantity):
        order = Order(uuid4())

        with pytest.raises(DomainValidationError, match="Quantity must be at least 1."):
            order.add_item(uuid4(), quantity, Decimal("10.00"))

        assert order.items == ()

    @pytest.mark.parametrize("price", [Decimal("0.001"), Decimal("10.005"), 0.001])
    def test_add_item_rejects_sub_cent_price(self, price):
        order = Order(uuid4())

        with pytest.raises(DomainValidationError, match="UnitPrice must have at most 2 decimal places."):
            order.add_item(uuid4(), 3, price)

        assert order.total_amount == Decimal("0")

    def test_trailing_zeros_do_not_count_as_precision(self):
        order = Order(uuid4())

        order.add_item(uuid4(), 2, Decimal("10.000"))

        assert order.total_amount == Decimal("20.00")

    def test_update_item_rejects_sub_cent_price(self):
        order = Order(uuid4())
        product_id = uuid4()
        order.add_item(product_id, 2, Decimal("10.00"))
        before = snapshot(order)

        with pytest.raises(DomainValidationError, match="at most 2 decimal places"):
            order.update_item(product_id, 2, Decimal("9.999"))

        assert snapshot(order) == before

    def test_update_item_validates_before_changing(self):
        order = Order(uuid4())
        product_id = uuid4()
        order.add_item(product_id, 2, Decimal("10.00"))
        before = snapshot(order)

        with pytest.raises(DomainValidationError, match="Quantity must be at least 1."):
            order.update_item(product_id, 0, Decimal("10.00"))

        assert snapshot(order) == before

    def test_update_unknown_item_fails(self):
        order = Order(uuid4())
        order.add_item(uuid4(), 1, Decimal("10.00"))
        missing = uuid4()

        with pytest.raises(DomainValidationError, match=f"Item with product id {missing} not found."):
            order.update_item(missing, 1, Decimal("1.00"))

    def test_remove_unknown_item_fails(self):
        order = Order(uuid4())

        with pytest.raises(DomainValidationError, match="not found"):
            order.remove_item(uuid4())

    def test_duplicate_product_lines_are_kept_and_first_is_updated(self):
        order = Order(uuid4())
        product_id = uuid4()
        order.add_item(product_id, 1, Decimal("10.00"))
        order.add_item(product_id, 2, Decimal("10.00"))

        order.update_item(product_id, 4, Decimal("10.00"))

        assert [item.quantity for item in order.items] == [4, 2]
        assert order.total_amount == Decimal("60.00")

    @pytest.mark.parametrize("status", [OrderStatus.PAID, OrderStatus.SHIPPED, OrderStatus.CANCELLED])
    def test_items_are_frozen_outside_pending(self, status):
        order = order_in_status(status)
        product_id = order.items[0].product_id
        before = snapshot(order)

        with pytest.raises(DomainValidationError, match="Cannot modify items of a non-pending order."):
            order.add_item(uuid4(), 1, Decimal("1.00"))
        with pytest.raises(DomainValidationError, match="Cannot modify items of a non-pending order."):
            order.update_item(product_id, 3, Decimal("1.00"))
        with pytest.raises(DomainValidationError, match="Cannot modify items of a non-pending order."):
            order.remove_item(product_id)

        assert snapshot(order) == before

    def test_items_view_is_read_only(self):
        order = order_in_status(OrderStatus.PENDING)

        with pytest.raises(AttributeError):
            order.items.append("x")


# (from_status, operation) -> resulting status, or the expected error message
TRANSITIONS = [
    (OrderStatus.PENDING, "mark_as_paid", OrderStatus.PAID),
    (OrderStatus.PENDING, "mark_as_shipped", "Only paid orders can be shipped."),
    (OrderStatus.PENDING, "mark_as_cancelled", OrderStatus.CANCELLED),
    (OrderStatus.PAID, "mark_as_paid", "Order is already paid."),
    (OrderStatus.PAID, "mark_as_shipped", OrderStatus.SHIPPED),
    (OrderStatus.PAID, "mark_as_cancelled", OrderStatus.CANCELLED),
    (OrderStatus.SHIPPED, "mark_as_paid", "Cannot pay a shipped order."),
    (OrderStatus.SHIPPED, "mark_as_shipped", "Only paid orders can be shipped."),
    (OrderStatus.SHIPPED, "mark_as_cancelled", "Cannot cancel a shipped order."),
    (OrderStatus.CANCELLED, "mark_as_paid", "Cannot pay a cancelled order."),
    (OrderStatus.CANCELLED, "mark_as_shipped", "Only paid orders can be shipped."),
    (OrderStatus.CANCELLED, "mark_as_cancelled", "Order is already cancelled."),
]


class TestOrderTransitions:

    @pytest.mark.parametrize("from_status, operation, expected", TRANSITIONS)
    def test_transition_table(self, from_status, operation, expected):
        order = order_in_status(from_status)
        before = snapshot(order)

        if isinstance(expected, OrderStatus):
            getattr(order, operation)()
            assert order.status == expected
        else:
            with pytest.raises(DomainValidationError) as exc_info:
                getattr(order, operation)()
            assert exc_info.value.message == expected
            assert snapshot(order) == before

    def test_paying_sets_paid_at(self):
        order = order_in_status(OrderStatus.PENDING)

        order.mark_as_paid()

        assert isinstance(order.paid_at, datetime)
        assert order.paid_at.tzinfo == timezone.utc

    def test_cannot_pay_an_empty_order(self):
        order = Order(uuid4())

        with pytest.raises(DomainValidationError, match="Cannot pay an order without items."):
            order.mark_as_paid()

        assert order.status == OrderStatus.PENDING
        assert order.paid_at is None

    def test_cancelling_a_paid_order_keeps_paid_at(self):
        order = order_in_status(OrderStatus.PAID)
        paid_at = order.paid_at

        order.mark_as_cancelled()

        assert order.status == OrderStatus.CANCELLED
        assert order.paid_at == paid_at

    def test_empty_pending_order_can_be_cancelled(self):
        order = Order(uuid4())

        order.mark_as_cancelled()

        assert order.status == OrderStatus.CANCELLED
        assert order.paid_at is None

    def test_shipping_keeps_total(self):
        order = order_in_status(OrderStatus.PAID)

        order.mark_as_shipped()

        assert order.total_amount == Decimal("10.00")


class TestOrderStatus:

    @pytest.mark.parametrize("raw, expected", [
        ("Paid", OrderStatus.PAID),
        ("paid", OrderStatus.PAID),
        ("  SHIPPED ", OrderStatus.SHIPPED),
        ("cancelled", OrderStatus.CANCELLED),
        ("Pending", OrderStatus.PENDING),
    ])
    def test_parse_is_case_insensitive(self, raw, expected):
        assert OrderStatus.parse(raw) == expected

    @pytest.mark.parametrize("raw", ["Delivered", "", "0", None])
    def test_parse_unknown_returns_none(self, raw):
        assert OrderStatus.parse(raw) is None

    def test_display_name_and_final_states(self):
        assert OrderStatus.CANCELLED.display_name == "Cancelled"
        assert OrderStatus.SHIPPED.is_final()
        assert OrderStatus.CANCELLED.is_final()
        assert not OrderStatus.PAID.is_final()


class TestOrderRehydrate:

    def test_rehydrate_restores_state_without_rules(self):
        order_id, customer_id, product_id = uuid4(), uuid4(), uuid4()
        created = datetime(2025, 1, 1, tzinfo=timezone.utc)
        paid = datetime(2025, 1, 2, tzinfo=timezone.utc)
        item = OrderItem.rehydrate(uuid4(), order_id, product_id, 3, Decimal("5.00"))

        order = Order.rehydrate(order_id, customer_id, OrderStatus.SHIPPED, created, paid, [item])

        assert order.id == order_id
        assert order.status == OrderStatus.SHIPPED
        assert order.paid_at == paid
        assert order.total_amount == Decimal("15.00")
        assert order.items[0].line_total == Decimal("15.00")

"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order aggregates.
An order and its lines are always written together in one transaction.

Author: TM3
Date: 2025-10-17
"""
from typing import Dict, List, Optional
from uuid import UUID

from order_management.core.database import get_db_connection_dict
from order_management.domain.order import Order, OrderItem, OrderStatus

ORDER_COLUMNS = "id, customer_id, status, total_amount, created_at, paid_at"
ITEM_COLUMNS = "id, order_id, product_id, quantity, unit_price, line_total, position"


class OrderRepository:
    """
    Repository for Order data access

    All SQL queries for orders are centralized here.
    """

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """
        Find order by ID with its items

        Args:
            order_id: Order ID

        Returns:
            Order aggregate or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE id = %s
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            cursor.execute(f"""
                SELECT {ITEM_COLUMNS}
                FROM order_items
                WHERE order_id = %s
                ORDER BY position
            """, (order_id,))

            items = cursor.fetchall()
            return self._build_order(row, items)

        finally:
            cursor.close()
            conn.close()

    def find_all(self) -> List[Order]:
        """
        Find all orders, oldest first

        Items for every order are loaded with a single query instead of one
        query per order.
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                ORDER BY created_at, id
            """)
            rows = cursor.fetchall()
            if not rows:
                return []

            order_ids = [row['id'] for row in rows]
            cursor.execute(f"""
                SELECT {ITEM_COLUMNS}
                FROM order_items
                WHERE order_id = ANY(%s)
                ORDER BY order_id, position
            """, (order_ids,))

            items_by_order: Dict[UUID, list] = {}
            for item in cursor.fetchall():
                items_by_order.setdefault(item['order_id'], []).append(item)

            return [self._build_order(row, items_by_order.get(row['id'], [])) for row in rows]

        finally:
            cursor.close()
            conn.close()

    def add(self, order: Order) -> None:
        """Insert a new order and its items"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO orders ({ORDER_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s)
            """, (
                order.id,
                order.customer_id,
                order.status.value,
                order.total_amount,
                order.created_at,
                order.paid_at,
            ))
            self._insert_items(cursor, order)
            conn.commit()

        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def update(self, order: Order) -> None:
        """
        Persist the current state of an order

        The aggregate owns its item collection, so the stored lines are
        replaced by the in-memory ones rather than diffed.
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                UPDATE orders
                SET status = %s,
                    total_amount = %s,
                    paid_at = %s
                WHERE id = %s
            """, (
                order.status.value,
                order.total_amount,
                order.paid_at,
                order.id,
            ))
            cursor.execute("DELETE FROM order_items WHERE order_id = %s", (order.id,))
            self._insert_items(cursor, order)
            conn.commit()

        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def delete(self, order_id: UUID) -> None:
        """Delete an order; its items go with it (ON DELETE CASCADE)"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM orders WHERE id = %s", (order_id,))
            conn.commit()

        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @staticmethod
    def _insert_items(cursor, order: Order) -> None:
        for position, item in enumerate(order.items):
            cursor.execute(f"""
                INSERT INTO order_items ({ITEM_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s)
            """, (
                item.id,
                order.id,
                item.product_id,
                item.quantity,
                item.unit_price,
                item.line_total,
                position,
            ))

    @staticmethod
    def _build_order(row: dict, items: list) -> Order:
        return Order.rehydrate(
            id=row['id'],
            customer_id=row['customer_id'],
            status=OrderStatus(row['status']),
            created_at=row['created_at'],
            paid_at=row['paid_at'],
            items=[
                OrderItem.rehydrate(
                    id=item['id'],
                    order_id=item['order_id'],
                    product_id=item['product_id'],
                    quantity=item['quantity'],
                    unit_price=item['unit_price'],
                )
                for item in items
            ],
        )

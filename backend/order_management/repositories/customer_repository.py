"""
Customer Repository - Data Access Layer for Customers

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional
from uuid import UUID

from order_management.core.database import get_db_connection_dict
from order_management.domain.customer import Customer
from order_management.domain.value_objects import Email, Phone

CUSTOMER_COLUMNS = "id, name, email, phone, address, created_at"


class CustomerRepository:
    """Repository for Customer data access"""

    def find_by_id(self, customer_id: UUID) -> Optional[Customer]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {CUSTOMER_COLUMNS}
                FROM customers
                WHERE id = %s
            """, (customer_id,))

            row = cursor.fetchone()
            return self._build_customer(row) if row else None

        finally:
            cursor.close()
            conn.close()

    def find_all(self) -> List[Customer]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {CUSTOMER_COLUMNS}
                FROM customers
                ORDER BY name
            """)
            return [self._build_customer(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def add(self, customer: Customer) -> None:
        self._execute_write(f"""
            INSERT INTO customers ({CUSTOMER_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s)
        """, (
            customer.id,
            customer.name,
            customer.email.value,
            customer.phone.value,
            customer.address,
            customer.created_at,
        ))

    def update(self, customer: Customer) -> None:
        self._execute_write("""
            UPDATE customers
            SET name = %s, email = %s, phone = %s, address = %s
            WHERE id = %s
        """, (
            customer.name,
            customer.email.value,
            customer.phone.value,
            customer.address,
            customer.id,
        ))

    def delete(self, customer_id: UUID) -> None:
        self._execute_write("DELETE FROM customers WHERE id = %s", (customer_id,))

    @staticmethod
    def _execute_write(query: str, params: tuple) -> None:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(query, params)
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @staticmethod
    def _build_customer(row: dict) -> Customer:
        # Stored values were validated on the way in
        return Customer.rehydrate(
            id=row['id'],
            name=row['name'],
            email=Email(row['email']),
            phone=Phone(row['phone']),
            address=row['address'],
            created_at=row['created_at'],
        )

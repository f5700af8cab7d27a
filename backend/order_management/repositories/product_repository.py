"""
Product Repository - Data Access Layer for Products

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional
from uuid import UUID

from order_management.core.database import get_db_connection_dict
from order_management.domain.product import Product

PRODUCT_COLUMNS = "id, name, sku, price, stock_quantity, is_active, created_at"


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    """

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Product ID

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id = %s
            """, (product_id,))

            row = cursor.fetchone()
            return self._build_product(row) if row else None

        finally:
            cursor.close()
            conn.close()

    def find_all(self) -> List[Product]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                ORDER BY name
            """)
            return [self._build_product(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def add(self, product: Product) -> None:
        self._execute_write(f"""
            INSERT INTO products ({PRODUCT_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s, %s)
        """, (
            product.id,
            product.name,
            product.sku,
            product.price,
            product.stock_quantity,
            product.is_active,
            product.created_at,
        ))

    def update(self, product: Product) -> None:
        self._execute_write("""
            UPDATE products
            SET name = %s, sku = %s, price = %s, stock_quantity = %s, is_active = %s
            WHERE id = %s
        """, (
            product.name,
            product.sku,
            product.price,
            product.stock_quantity,
            product.is_active,
            product.id,
        ))

    def delete(self, product_id: UUID) -> None:
        self._execute_write("DELETE FROM products WHERE id = %s", (product_id,))

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
    def _build_product(row: dict) -> Product:
        return Product.rehydrate(
            id=row['id'],
            name=row['name'],
            sku=row['sku'],
            price=row['price'],
            stock_quantity=row['stock_quantity'],
            is_active=row['is_active'],
            created_at=row['created_at'],
        )

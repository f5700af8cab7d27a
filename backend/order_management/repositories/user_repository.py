"""
User Repository - Data Access Layer for API users
"""
from typing import List, Optional
from uuid import UUID

from order_management.core.database import get_db_connection_dict
from order_management.domain.user import User, UserRole
from order_management.domain.value_objects import Email

USER_COLUMNS = "id, name, email, password_hash, role, created_at"


class UserRepository:
    """Repository for User data access"""

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        return self._find_one("id = %s", user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        """Emails are stored normalized (lower case)"""
        return self._find_one("email = %s", email.strip().lower())

    def find_all(self) -> List[User]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {USER_COLUMNS}
                FROM users
                ORDER BY created_at DESC
            """)
            return [self._build_user(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def add(self, user: User) -> None:
        self._execute_write(f"""
            INSERT INTO users ({USER_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s)
        """, (
            user.id,
            user.name,
            user.email.value,
            user.password_hash,
            user.role.value,
            user.created_at,
        ))

    def update(self, user: User) -> None:
        self._execute_write("""
            UPDATE users
            SET name = %s, email = %s, password_hash = %s, role = %s
            WHERE id = %s
        """, (
            user.name,
            user.email.value,
            user.password_hash,
            user.role.value,
            user.id,
        ))

    def delete(self, user_id: UUID) -> None:
        self._execute_write("DELETE FROM users WHERE id = %s", (user_id,))

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

    def _find_one(self, condition: str, value) -> Optional[User]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {USER_COLUMNS}
                FROM users
                WHERE {condition}
            """, (value,))

            row = cursor.fetchone()
            return self._build_user(row) if row else None

        finally:
            cursor.close()
            conn.close()

    @staticmethod
    def _build_user(row: dict) -> User:
        return User.rehydrate(
            id=row['id'],
            name=row['name'],
            email=Email(row['email']),
            password_hash=row['password_hash'],
            role=UserRole(row['role']),
            created_at=row['created_at'],
        )

"""Data access for users."""

import logging

from storefront.db.postgres_client import PostgresConnection
from storefront.models import User

logger = logging.getLogger(__name__)


class UserDao:
    def __init__(self, db: PostgresConnection):
        self.db = db

    @staticmethod
    def _from_row(row) -> User:
        return User(id=row["id"], username=row["username"], email=row["email"])

    def get_by_id(self, user_id: int) -> User | None:
        """Fetch a user by ID, or None when no row matches."""
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT id, username, email FROM users WHERE id = %s", (user_id,))
            row = cursor.fetchone()
        return self._from_row(row) if row else None

    def get_all(self) -> list[User]:
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT id, username, email FROM users ORDER BY id")
            rows = cursor.fetchall()
        return [self._from_row(row) for row in rows]

    def count(self) -> int:
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT COUNT(*) AS count FROM users")
            return cursor.fetchone()["count"]

    def add(self, user: User) -> int:
        """Insert a user and return its generated ID. The ID is also set on ``user``."""
        with self.db.get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (username, email) VALUES (%s, %s) RETURNING id",
                (user.username, user.email),
            )
            user.id = cursor.fetchone()["id"]
        logger.info(f"Created user {user.id}")
        return user.id

    def update(self, user: User) -> bool:
        """Update username and email. Returns False when no user has ``user.id``."""
        with self.db.get_cursor() as cursor:
            cursor.execute(
                "UPDATE users SET username = %s, email = %s WHERE id = %s",
                (user.username, user.email, user.id),
            )
            return cursor.rowcount > 0

    def delete(self, user_id: int):
        """
        Delete a user together with their orders.

        The user's order/product links go first, then the orders, then the user
        row, all in a single transaction.
        """
        with self.db.transaction() as cursor:
            cursor.execute(
                """
                DELETE FROM order_products
                WHERE order_id IN (SELECT id FROM orders WHERE user_id = %s)
                """,
                (user_id,),
            )
            cursor.execute("DELETE FROM orders WHERE user_id = %s", (user_id,))
            cursor.execute("DELETE FROM users WHERE id = %s", (user_id,))
        logger.info(f"Deleted user {user_id}")

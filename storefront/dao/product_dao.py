"""Data access for products."""

import logging
from decimal import Decimal

from storefront.db.postgres_client import PostgresConnection
from storefront.models import Product

logger = logging.getLogger(__name__)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class ProductDao:
    def __init__(self, db: PostgresConnection):
        self.db = db

    @staticmethod
    def _from_row(row) -> Product:
        return Product(id=row["id"], name=row["name"], price=_to_decimal(row["price"]))

    def get_by_id(self, product_id: int) -> Product | None:
        """Fetch a product by ID, or None when no row matches."""
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT id, name, price FROM products WHERE id = %s", (product_id,))
            row = cursor.fetchone()
        return self._from_row(row) if row else None

    def get_all(self) -> list[Product]:
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT id, name, price FROM products ORDER BY id")
            rows = cursor.fetchall()
        return [self._from_row(row) for row in rows]

    def get_for_order(self, order_id: int) -> list[Product]:
        """Products linked to an order through order_products."""
        with self.db.get_cursor() as cursor:
            cursor.execute(
                """
                SELECT p.id, p.name, p.price
                FROM products p
                JOIN order_products op ON p.id = op.product_id
                WHERE op.order_id = %s
                ORDER BY p.id
                """,
                (order_id,),
            )
            rows = cursor.fetchall()
        return [self._from_row(row) for row in rows]

    def count(self) -> int:
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT COUNT(*) AS count FROM products")
            return cursor.fetchone()["count"]

    def add(self, product: Product) -> int:
        """Insert a product and return its generated ID. The ID is also set on ``product``."""
        with self.db.get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO products (name, price) VALUES (%s, %s) RETURNING id",
                (product.name, _to_decimal(product.price)),
            )
            product.id = cursor.fetchone()["id"]
        logger.info(f"Created product {product.id}")
        return product.id

    def update(self, product: Product) -> bool:
        """Update name and price. Returns False when no product has ``product.id``."""
        with self.db.get_cursor() as cursor:
            cursor.execute(
                "UPDATE products SET name = %s, price = %s WHERE id = %s",
                (product.name, _to_decimal(product.price), product.id),
            )
            return cursor.rowcount > 0

    def delete(self, product_id: int):
        """Delete a product and every order link pointing at it, in one transaction."""
        with self.db.transaction() as cursor:
            cursor.execute("DELETE FROM order_products WHERE product_id = %s", (product_id,))
            cursor.execute("DELETE FROM products WHERE id = %s", (product_id,))
        logger.info(f"Deleted product {product_id}")

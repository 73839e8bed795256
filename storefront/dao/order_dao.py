"""Data access for orders and their product links."""

import logging

from storefront.dao.product_dao import ProductDao
from storefront.dao.user_dao import UserDao
from storefront.db.postgres_client import PostgresConnection
from storefront.models import Order

logger = logging.getLogger(__name__)


class OrderDao:
    def __init__(self, db: PostgresConnection, user_dao: UserDao | None = None, product_dao: ProductDao | None = None):
        self.db = db
        self.user_dao = user_dao or UserDao(db)
        self.product_dao = product_dao or ProductDao(db)

    def get_by_id(self, order_id: int) -> Order | None:
        """
        Load an order with its owner and products.

        Returns None when the order row is missing. A missing owner is not an
        error here: ``order.user`` is left as None and ``order.user_id`` keeps
        the stored reference.
        """
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT id, user_id FROM orders WHERE id = %s", (order_id,))
            row = cursor.fetchone()
        if not row:
            return None

        order = Order(id=row["id"], user_id=row["user_id"])
        order.user = self.user_dao.get_by_id(row["user_id"])
        order.products = self.product_dao.get_for_order(row["id"])
        return order

    def count(self) -> int:
        with self.db.get_cursor() as cursor:
            cursor.execute("SELECT COUNT(*) AS count FROM orders")
            return cursor.fetchone()["count"]

    def add(self, order: Order) -> int:
        """
        Insert an order and one order_products row per product.

        Everything runs in one transaction; if any insert fails nothing is kept.
        Returns the generated order ID and sets it on ``order``.
        """
        user_id = order.user.id if order.user is not None else order.user_id
        with self.db.transaction() as cursor:
            cursor.execute("INSERT INTO orders (user_id) VALUES (%s) RETURNING id", (user_id,))
            order_id = cursor.fetchone()["id"]

            for product in order.products:
                cursor.execute(
                    "INSERT INTO order_products (order_id, product_id) VALUES (%s, %s)",
                    (order_id, product.id),
                )

        order.id = order_id
        logger.info(f"Created order {order_id} with {len(order.products)} products")
        return order_id

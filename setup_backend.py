"""
Database Setup Script for the Storefront Backend
Checks the PostgreSQL connection, creates the tables and reports row counts.
"""

import logging
import sys

from storefront.config import PostgresSettings
from storefront.dao import OrderDao, ProductDao, UserDao
from storefront.db.postgres_client import PostgresConnection

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_database_connection(db: PostgresConnection) -> bool:
    """Check that PostgreSQL answers."""
    logger.info("Checking database connection...")
    try:
        if db.ping():
            logger.info("PostgreSQL connection: OK")
            return True
        logger.error("PostgreSQL connection: Failed")
    except Exception as e:
        logger.error(f"PostgreSQL connection error: {e}")
    return False


def report_row_counts(db: PostgresConnection):
    user_dao = UserDao(db)
    product_dao = ProductDao(db)
    order_dao = OrderDao(db, user_dao=user_dao, product_dao=product_dao)
    logger.info(f"Users in database: {user_dao.count()}")
    logger.info(f"Products in database: {product_dao.count()}")
    logger.info(f"Orders in database: {order_dao.count()}")


def main() -> bool:
    """Main setup function."""
    logger.info("Setting up Storefront Backend...")
    db = PostgresConnection(PostgresSettings.from_env())

    if not check_database_connection(db):
        logger.error("Database connection check failed!")
        return False

    try:
        db.create_tables()
        report_row_counts(db)
    except Exception as e:
        logger.error(f"Setup failed: {e}")
        return False
    finally:
        db.dispose()

    logger.info("Setup complete! Ready to start the server.")
    return True


if __name__ == "__main__":
    sys.exit(0 if main() else 1)

"""PostgreSQL connection and utilities."""

import logging
from contextlib import contextmanager

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine

from storefront.config import PostgresSettings
from storefront.db.postgres_bootstrap import Base
from storefront.models import *  # Needed for Base metadata

logger = logging.getLogger(__name__)


class PostgresConnection:
    """Hands out one psycopg2 connection per call; nothing is pooled."""

    def __init__(self, settings: PostgresSettings):
        self.settings = settings
        self._engine = None

    @property
    def engine(self):
        if not self._engine:
            self._engine = create_engine(self.settings.sqlalchemy_url)
        return self._engine

    def connect(self):
        return psycopg2.connect(**self.settings.connect_kwargs())

    @contextmanager
    def get_cursor(self):
        """Get a cursor on a fresh auto-commit connection for single statements."""
        conn = self.connect()
        try:
            conn.autocommit = True
            with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                yield cursor
        finally:
            conn.close()

    @contextmanager
    def transaction(self):
        """
        Run several statements as one unit of work.

        Auto-commit is switched off for the duration of the block. The block is
        committed when it finishes, rolled back when it raises, and auto-commit is
        switched back on before the connection is closed either way.
        """
        conn = self.connect()
        try:
            conn.autocommit = False
            with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                yield cursor
            conn.commit()
        except Exception as e:
            logger.error(f"Rolling back transaction: {e}")
            conn.rollback()
            raise
        finally:
            if not conn.closed:
                conn.autocommit = True
            conn.close()

    def ping(self) -> bool:
        with self.get_cursor() as cursor:
            cursor.execute("SELECT 1 AS ok")
            return cursor.fetchone() is not None

    def create_tables(self):
        """Create all tables in the database."""
        logger.log(logging.INFO, "Creating tables...")

        try:
            Base.metadata.create_all(self.engine)
            logger.log(logging.INFO, "Tables created successfully.")
        except Exception as e:
            logger.log(logging.ERROR, f"Error creating tables: {e}")
            raise e

    def drop_tables(self):
        """Drop all tables known to the models. Used by the integration tests."""
        Base.metadata.drop_all(self.engine)

    def dispose(self):
        if self._engine:
            self._engine.dispose()
            self._engine = None

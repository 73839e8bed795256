"""
Declarative base shared by the SQLAlchemy models.
Kept in its own module to prevent circular imports when creating the tables.
"""

from sqlalchemy.orm.decl_api import declarative_base

Base = declarative_base()

"""
Association table linking orders to products.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from storefront.db.postgres_bootstrap import Base

order_products = Table(
    "order_products",
    Base.metadata,
    Column("order_id", Integer, ForeignKey("orders.id"), nullable=False, index=True),
    Column("product_id", Integer, ForeignKey("products.id"), nullable=False, index=True),
)

"""
Orders SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from storefront.db.postgres_bootstrap import Base
from storefront.models.order_products import order_products


class Order(Base):
    """
    Order SQLAlchemy model.

    No ON DELETE CASCADE on the foreign keys: the DAOs remove dependent rows
    explicitly inside a transaction before deleting a user or a product.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    user = relationship("User", back_populates="orders")
    products = relationship("Product", secondary=order_products, back_populates="orders")

    def __repr__(self):
        return f"<Order(id={self.id}, user_id={self.user_id})>"

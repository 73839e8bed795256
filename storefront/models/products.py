"""
Products SQLAlchemy model.
"""

from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql.schema import CheckConstraint

from storefront.db.postgres_bootstrap import Base
from storefront.models.order_products import order_products


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    price = Column(Numeric(10, 2), CheckConstraint("price >= 0"), nullable=False)

    orders = relationship("Order", secondary=order_products, back_populates="products")

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name}, price={self.price})>"

"""
Users SQLAlchemy model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from storefront.db.postgres_bootstrap import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)

    # back-reference only; the DAOs never persist through it
    orders = relationship("Order", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, email={self.email})>"

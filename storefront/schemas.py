"""Pydantic models for request and response bodies."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# products.price is NUMERIC(10, 2)
PRICE_LIMIT = 10**8
PRICE_DECIMAL_PLACES = 2


class UserDto(BaseModel):
    id: Optional[int] = None
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class ProductDto(BaseModel):
    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, lt=PRICE_LIMIT, allow_inf_nan=False)

    @field_validator("price")
    @classmethod
    def check_decimal_places(cls, value: float) -> float:
        if Decimal(str(value)).as_tuple().exponent < -PRICE_DECIMAL_PLACES:
            raise ValueError(f"price must have at most {PRICE_DECIMAL_PLACES} decimal places")
        return value


class OrderDto(BaseModel):
    """
    Wire form of an order.

    Clients send ``user_id`` and ``product_ids``; responses also carry the
    resolved ``user`` and ``products``.
    """

    id: Optional[int] = None
    user_id: int
    product_ids: list[int] = []
    user: Optional[UserDto] = None
    products: list[ProductDto] = []


class MessageResponse(BaseModel):
    message: str

"""Request-scoped helpers shared by the routers."""

from fastapi import HTTPException, Request

from storefront.converters import OrderConverter
from storefront.dao import OrderDao, ProductDao, UserDao

INTERNAL_ERROR = "Internal server error"


def get_user_dao(request: Request) -> UserDao:
    return request.app.state.user_dao


def get_product_dao(request: Request) -> ProductDao:
    return request.app.state.product_dao


def get_order_dao(request: Request) -> OrderDao:
    return request.app.state.order_dao


def get_order_converter(request: Request) -> OrderConverter:
    return request.app.state.order_converter


def parse_id(raw: str | None, entity: str) -> int:
    """Turn the ``id`` query parameter into an int or fail with 400."""
    if raw is None or not raw.strip():
        raise HTTPException(status_code=400, detail=f"{entity} ID is required")
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"{entity} ID must be an integer")

"""HTTP handlers for /orders."""

import logging
from typing import Optional

import psycopg2
from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api.deps import INTERNAL_ERROR, get_order_converter, get_order_dao, parse_id
from storefront.converters import OrderConverter
from storefront.dao import OrderDao
from storefront.exceptions import EmptyOrderError, ReferenceNotFoundError
from storefront.schemas import OrderDto

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=OrderDto)
def get_order(
    id: Optional[str] = Query(None),
    dao: OrderDao = Depends(get_order_dao),
    converter: OrderConverter = Depends(get_order_converter),
):
    order_id = parse_id(id, "Order")
    try:
        order = dao.get_by_id(order_id)
        if order is None:
            raise HTTPException(status_code=404, detail="Order not found")
        return converter.to_dto(order)
    except HTTPException:
        raise
    except psycopg2.Error as e:
        logger.error(f"Database error fetching order {order_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error fetching order {order_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("", response_model=OrderDto, status_code=201)
def create_order(
    payload: OrderDto,
    dao: OrderDao = Depends(get_order_dao),
    converter: OrderConverter = Depends(get_order_converter),
):
    """Create an order for an existing user from a list of existing product IDs."""
    try:
        order = converter.to_entity(payload)
        order.id = None
        dao.add(order)
        return converter.to_dto(order)
    except (EmptyOrderError, ReferenceNotFoundError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except psycopg2.Error as e:
        logger.error(f"Database error creating order: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error creating order: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

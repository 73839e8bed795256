"""HTTP handlers for /products."""

import logging
from typing import Optional, Union

import psycopg2
from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api.deps import INTERNAL_ERROR, get_product_dao, parse_id
from storefront.converters import dto_to_product, product_to_dto
from storefront.dao import ProductDao
from storefront.schemas import MessageResponse, ProductDto

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Union[ProductDto, list[ProductDto]])
def get_products(id: Optional[str] = Query(None), dao: ProductDao = Depends(get_product_dao)):
    """Fetch one product by ``id`` or the whole catalogue."""
    try:
        if id is None:
            return [product_to_dto(product) for product in dao.get_all()]
        product = dao.get_by_id(parse_id(id, "Product"))
        if product is None:
            raise HTTPException(status_code=404, detail="Product not found")
        return product_to_dto(product)
    except HTTPException:
        raise
    except psycopg2.Error as e:
        logger.error(f"Database error fetching products: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error fetching products: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("", response_model=ProductDto, status_code=201)
def create_product(payload: ProductDto, dao: ProductDao = Depends(get_product_dao)):
    try:
        product = dto_to_product(payload)
        product.id = None
        dao.add(product)
        return product_to_dto(product)
    except psycopg2.Error as e:
        logger.error(f"Database error creating product: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error creating product: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.put("", response_model=ProductDto)
def update_product(payload: ProductDto, dao: ProductDao = Depends(get_product_dao)):
    if payload.id is None:
        raise HTTPException(status_code=400, detail="Product ID is required")
    try:
        product = dto_to_product(payload)
        if not dao.update(product):
            raise HTTPException(status_code=404, detail="Product not found")
        return product_to_dto(product)
    except HTTPException:
        raise
    except psycopg2.Error as e:
        logger.error(f"Database error updating product {payload.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error updating product {payload.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.delete("", response_model=MessageResponse)
def delete_product(id: Optional[str] = Query(None), dao: ProductDao = Depends(get_product_dao)):
    """Delete a product and unlink it from every order."""
    product_id = parse_id(id, "Product")
    try:
        dao.delete(product_id)
        return MessageResponse(message="Product deleted")
    except psycopg2.Error as e:
        logger.error(f"Database error deleting product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error deleting product {product_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

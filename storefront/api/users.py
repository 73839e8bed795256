"""HTTP handlers for /users."""

import logging
from typing import Optional, Union

import psycopg2
from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.api.deps import INTERNAL_ERROR, get_user_dao, parse_id
from storefront.converters import dto_to_user, user_to_dto
from storefront.dao import UserDao
from storefront.schemas import MessageResponse, UserDto

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Union[UserDto, list[UserDto]])
def get_users(id: Optional[str] = Query(None), dao: UserDao = Depends(get_user_dao)):
    """Fetch one user by ``id`` or all users when no ``id`` is given."""
    try:
        if id is None:
            return [user_to_dto(user) for user in dao.get_all()]
        user = dao.get_by_id(parse_id(id, "User"))
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        return user_to_dto(user)
    except HTTPException:
        raise
    except psycopg2.Error as e:
        logger.error(f"Database error fetching users: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error fetching users: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("", response_model=UserDto, status_code=201)
def create_user(payload: UserDto, dao: UserDao = Depends(get_user_dao)):
    try:
        user = dto_to_user(payload)
        user.id = None
        dao.add(user)
        return user_to_dto(user)
    except psycopg2.Error as e:
        logger.error(f"Database error creating user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error creating user: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.put("", response_model=UserDto)
def update_user(payload: UserDto, dao: UserDao = Depends(get_user_dao)):
    if payload.id is None:
        raise HTTPException(status_code=400, detail="User ID is required")
    try:
        user = dto_to_user(payload)
        if not dao.update(user):
            raise HTTPException(status_code=404, detail="User not found")
        return user_to_dto(user)
    except HTTPException:
        raise
    except psycopg2.Error as e:
        logger.error(f"Database error updating user {payload.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error updating user {payload.id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.delete("", response_model=MessageResponse)
def delete_user(id: Optional[str] = Query(None), dao: UserDao = Depends(get_user_dao)):
    """Delete a user along with their orders."""
    user_id = parse_id(id, "User")
    try:
        dao.delete(user_id)
        return MessageResponse(message="User deleted")
    except psycopg2.Error as e:
        logger.error(f"Database error deleting user {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error deleting user {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

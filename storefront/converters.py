"""Mapping between the wire DTOs and the persistence entities."""

import logging
from decimal import Decimal

from storefront.dao import ProductDao, UserDao
from storefront.exceptions import EmptyOrderError, ReferenceNotFoundError
from storefront.models import Order, Product, User
from storefront.schemas import OrderDto, ProductDto, UserDto

logger = logging.getLogger(__name__)


def user_to_dto(user: User) -> UserDto:
    return UserDto(id=user.id, username=user.username, email=user.email)


def dto_to_user(dto: UserDto) -> User:
    return User(id=dto.id, username=dto.username, email=dto.email)


def product_to_dto(product: Product) -> ProductDto:
    return ProductDto(id=product.id, name=product.name, price=float(product.price))


def dto_to_product(dto: ProductDto) -> Product:
    # str() keeps 1.5 as Decimal("1.5"), not its binary float expansion
    return Product(id=dto.id, name=dto.name, price=Decimal(str(dto.price)))


class OrderConverter:
    """Resolves order DTOs against the database and flattens orders back into DTOs."""

    def __init__(self, user_dao: UserDao, product_dao: ProductDao):
        self.user_dao = user_dao
        self.product_dao = product_dao

    def to_entity(self, dto: OrderDto) -> Order:
        """
        Build an Order entity from a DTO.

        Raises:
            EmptyOrderError: the DTO lists no products.
            ReferenceNotFoundError: the user or one of the products does not exist.
        """
        if not dto.product_ids:
            raise EmptyOrderError()

        user = self.user_dao.get_by_id(dto.user_id)
        if user is None:
            raise ReferenceNotFoundError("User", dto.user_id)

        products = []
        for product_id in dto.product_ids:
            product = self.product_dao.get_by_id(product_id)
            if product is None:
                raise ReferenceNotFoundError("Product", product_id)
            products.append(product)

        order = Order(id=dto.id, user_id=user.id)
        order.user = user
        order.products = products
        return order

    def to_dto(self, order: Order) -> OrderDto:
        user = order.user
        if user is None:
            logger.warning(f"Order {order.id} references missing user {order.user_id}")
        return OrderDto(
            id=order.id,
            user_id=user.id if user is not None else order.user_id,
            product_ids=[product.id for product in order.products],
            user=user_to_dto(user) if user is not None else None,
            products=[product_to_dto(product) for product in order.products],
        )

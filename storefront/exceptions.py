"""Errors raised by the storefront conversion layer."""


class StorefrontError(Exception):
    """Base class for storefront errors."""


class ReferenceNotFoundError(StorefrontError):
    """A DTO references a user or product that does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class EmptyOrderError(StorefrontError, ValueError):
    """An order was submitted without any products."""

    def __init__(self):
        super().__init__("An order must have at least one product")

"""Domain layer - Business rules and entities"""

from .exceptions.base import (
    DomainError,
    NotFoundError,
    BadRequestError,
    ValidationError,
    ItemNotFoundError,
)
from .models.item import Item

__all__ = [
    "DomainError",
    "NotFoundError",
    "BadRequestError",
    "ValidationError",
    "ItemNotFoundError",
    "Item",
]

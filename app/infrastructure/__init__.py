"""Infrastructure layer - Technical implementations"""

from .repositories.item_repository import ItemRepository

__all__ = ["ItemRepository"]

from .templates import get_templates

__all__ = [
    "get_templates",
]

"""Presentation layer - API and user interfaces"""

from .api import api_router
from .views import views_router
from .exceptions import APIError, ErrorResponse, domain_error_to_api_error

__all__ = [
    "api_router",
    "views_router",
    "APIError",
    "ErrorResponse",
    "domain_error_to_api_error",
]

from fastapi import APIRouter

from app.presentation.views import basic_items

views_router = APIRouter()
views_router.include_router(basic_items.router)

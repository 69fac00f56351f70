"""
Routes package - organized API and page routes.

Import the combined router for use in main.py.
"""
from fastapi import APIRouter

from .member_routes import router as member_router
from .trainer_routes import router as trainer_router
from .schedule_routes import router as schedule_router
from .payment_routes import router as payment_router
from .page_routes import router as page_router

# Combined router that includes all sub-routers
combined_router = APIRouter()
combined_router.include_router(member_router, tags=["members"])
combined_router.include_router(trainer_router, tags=["trainers"])
combined_router.include_router(schedule_router, tags=["classes"])
combined_router.include_router(payment_router, tags=["payments"])
combined_router.include_router(page_router, tags=["pages"], include_in_schema=False)

__all__ = ['combined_router', 'member_router', 'trainer_router', 'schedule_router', 'payment_router', 'page_router']

"""
Top‑level routers.

``router`` is mounted under ``/api`` by the application factory.
``webhook_router`` is mounted without a prefix so the LINE platform can
post to ``/webhook``.
"""

from fastapi import APIRouter

from .endpoints import cars, webhook

router = APIRouter()
router.include_router(cars.router, prefix="/cars", tags=["cars"])

webhook_router = APIRouter()
webhook_router.include_router(webhook.router, tags=["webhook"])

"""
Top-level API router.

Aggregates the endpoint routers.  Review routes are mounted without a
prefix because clients address ``/reviews`` and ``/delete-review``
directly.
"""

from fastapi import APIRouter

from .endpoints import reviews


router = APIRouter()

router.include_router(reviews.router, tags=["reviews"])

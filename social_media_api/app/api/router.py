"""
Top-level router for the JSON API.

Aggregates the resource routers under the ``/api`` prefix applied in
``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import auth, posts


router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(posts.router, prefix="/posts", tags=["posts"])

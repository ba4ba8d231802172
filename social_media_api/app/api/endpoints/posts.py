"""
Post endpoints.

Listing and reading are public.  Creating a post requires a bearer
token and stamps the token's user as the author.  Updating and deleting
are open to any caller, with or without a token, and any post may be
edited or removed by anyone.

Path ids and the ``page``/``limit`` query parameters are taken as raw
strings and parsed leniently by the service, so ``/api/posts/abc`` is
a 404 and ``?page=x`` falls back to page 1 instead of failing
validation.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from social_media_api.app.api.deps import get_post_service
from social_media_api.app.core.security import get_current_user
from social_media_api.app.schemas.post import PostCreate, PostUpdate
from social_media_api.app.schemas.user import TokenIdentity
from social_media_api.app.services.post_service import PostService, parse_int


router = APIRouter()


@router.get("")
async def list_posts(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: PostService = Depends(get_post_service),
) -> Dict[str, Any]:
    """Return a page of posts in creation order.

    - **page**: 1-based page number, default 1.
    - **limit**: page size, default 5.
    """
    posts, pagination = await service.list_posts(page=page, limit=limit)
    return {
        "success": True,
        "data": [p.to_response() for p in posts],
        "pagination": pagination.to_response(),
    }


@router.get("/{post_id}")
async def get_post(post_id: str, service: PostService = Depends(get_post_service)) -> Dict[str, Any]:
    post = await service.get_post(parse_int(post_id))
    return {"success": True, "data": post.to_response()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: Optional[PostCreate] = None,
    current_user: TokenIdentity = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
) -> Dict[str, Any]:
    """Create a post authored by the authenticated user."""
    post = await service.create_post(payload or PostCreate(), current_user)
    return {
        "success": True,
        "data": post.to_response(),
        "message": "Post created successfully",
    }


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    payload: Optional[PostUpdate] = None,
    service: PostService = Depends(get_post_service),
) -> Dict[str, Any]:
    """Update a post's title and/or content.

    Fields that are omitted or empty keep their current value.
    """
    post = await service.update_post(parse_int(post_id), payload or PostUpdate())
    return {
        "success": True,
        "data": post.to_response(),
        "message": "Post updated successfully",
    }


@router.delete("/{post_id}")
async def delete_post(post_id: str, service: PostService = Depends(get_post_service)) -> Dict[str, Any]:
    """Delete a post and return the deleted record."""
    post = await service.delete_post(parse_int(post_id))
    return {
        "success": True,
        "data": post.to_response(),
        "message": "Post deleted successfully",
    }

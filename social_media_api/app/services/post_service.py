"""
Business logic for posts.

``PostService`` wraps a ``PostStore`` with the rules of the posts API:
required fields on create, partial updates, and offset/limit
pagination.  Update and delete take no caller identity: any client may
change or remove any post.
"""

import logging
import math
import re
from dataclasses import asdict
from typing import List, Optional, Tuple

from ..core.errors import NotFoundError, ValidationError
from ..core.store import Post, PostStore
from ..schemas.post import Pagination, PostCreate, PostRead, PostUpdate
from ..schemas.user import TokenIdentity


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``raw`` (``"3abc"`` -> 3).

    Returns ``None`` when ``raw`` is missing or does not start with digits.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def parse_int_or_default(raw: Optional[str], default: int) -> int:
    """Parse a query parameter, falling back to ``default``.

    Missing, non-numeric and zero values all give the default; negative
    values are returned unchanged.
    """
    return parse_int(raw) or default


class PostService:
    """CRUD and pagination operations for one ``PostStore``."""

    def __init__(self, posts: PostStore) -> None:
        self.posts = posts

    async def list_posts(
        self,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> Tuple[List[PostRead], Pagination]:
        """Return one page of posts in insertion order plus pagination data.

        ``page`` and ``limit`` are the raw query strings.  No bounds are
        enforced: a page past the end yields an empty list.
        """
        page_number = parse_int_or_default(page, DEFAULT_PAGE)
        page_size = parse_int_or_default(limit, DEFAULT_LIMIT)
        start_index = (page_number - 1) * page_size
        end_index = page_number * page_size

        items, total = self.posts.page(start_index, end_index)
        pagination = Pagination(
            current_page=page_number,
            total_pages=math.ceil(total / page_size),
            total_posts=total,
            has_next=end_index < total,
            has_prev=start_index > 0,
        )
        return [self._read(p) for p in items], pagination

    async def get_post(self, post_id: Optional[int]) -> PostRead:
        post = self.posts.get(post_id) if post_id is not None else None
        if post is None:
            raise NotFoundError("Post not found")
        return self._read(post)

    async def create_post(self, data: PostCreate, author: TokenIdentity) -> PostRead:
        """Store a new post written by ``author``."""
        if not data.title or not data.content:
            raise ValidationError("Please provide title and content")
        post = self.posts.add(
            title=data.title,
            content=data.content,
            author=author.username,
            author_id=author.id,
        )
        logger.info("User %s created post %s", author.username, post.id)
        return self._read(post)

    async def update_post(self, post_id: Optional[int], data: PostUpdate) -> PostRead:
        """Apply a partial update.

        Only non-empty ``title``/``content`` values replace the stored
        ones.  ``updatedAt`` is refreshed even when nothing changed.
        """
        post = self.posts.update(post_id, title=data.title, content=data.content) if post_id is not None else None
        if post is None:
            raise NotFoundError("Post not found")
        logger.info("Updated post %s", post.id)
        return self._read(post)

    async def delete_post(self, post_id: Optional[int]) -> PostRead:
        """Remove a post and return the record as it was."""
        post = self.posts.remove(post_id) if post_id is not None else None
        if post is None:
            raise NotFoundError("Post not found")
        logger.info("Deleted post %s", post.id)
        return self._read(post)

    async def all_posts(self) -> List[PostRead]:
        return [self._read(p) for p in self.posts.all()]

    @staticmethod
    def _read(post: Post) -> PostRead:
        return PostRead(**asdict(post))

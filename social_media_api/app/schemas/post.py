"""
Pydantic models for post data.

Posts are exchanged with camelCase keys (``authorId``, ``createdAt``,
``updatedAt``).  ``PostRead`` uses field aliases for that and
``to_response`` drops unset optional fields, so ``updatedAt`` only
appears once a post has been edited.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """Schema for creating a post.

    The author is always taken from the bearer token; any author fields in
    the request body are ignored.
    """

    title: Optional[str] = Field(None, examples=["Hello"])
    content: Optional[str] = Field(None, examples=["My first post"])


class PostUpdate(BaseModel):
    """Schema for updating a post.

    All fields are optional; only provided, non-empty values will be updated.
    """

    title: Optional[str] = None
    content: Optional[str] = None


class PostRead(BaseModel):
    """Schema for reading a post from the API."""

    id: int
    title: str
    content: str
    author: str
    author_id: Optional[int] = Field(None, alias="authorId")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Pagination(BaseModel):
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    total_posts: int = Field(..., alias="totalPosts")
    has_next: bool = Field(..., alias="hasNext")
    has_prev: bool = Field(..., alias="hasPrev")

    model_config = {
        "populate_by_name": True,
    }

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

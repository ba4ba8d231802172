"""
Dependency providers for the API handlers.

Stores and settings live on ``app.state`` (see ``main.create_app``);
these functions hand them to handlers wrapped in their services so each
application instance, including each test app, has its own data.
"""

from fastapi import Request

from ..services.post_service import PostService
from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return UserService(request.app.state.users, request.app.state.settings)


def get_post_service(request: Request) -> PostService:
    return PostService(request.app.state.posts)

"""
Main entrypoint for the Social Media Platform API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory stores, registers the JSON error handlers and
includes the routers.  ``create_app`` builds and configures an app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn social_media_api.app.main:app --reload
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from .api.endpoints import pages
from .api.router import router as api_router
from .core.config import DEFAULT_SECRET_KEY, Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.security import hash_password
from .core.store import PostStore, UserStore


logger = logging.getLogger(__name__)

DEMO_USERS = [
    ("john", "john@example.com", "password123"),
    ("jane", "jane@example.com", "password456"),
]

DEMO_POSTS = [
    ("First Post", "This is my first post!", "John"),
    ("Second Post", "Another great post!", "Jane"),
]


def seed_demo_data(users: UserStore, posts: PostStore, config: Settings) -> None:
    """Load the demo accounts and posts into empty stores.

    Demo posts have no ``author_id``; they are not linked to the demo
    accounts.
    """
    for username, email, password in DEMO_USERS:
        users.add(username, email, hash_password(password, config.password_hash_iterations))
    created_at = datetime.now(timezone.utc)
    for title, content, author in DEMO_POSTS:
        posts.add(title=title, content=content, author=author, author_id=None, created_at=created_at)
    logger.info("Seeded %d demo users and %d demo posts", len(users), len(posts))


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call returns an application with its own empty (or seeded)
    stores, so tests can build isolated apps.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the environment-derived defaults.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file)

    if config.secret_key == DEFAULT_SECRET_KEY:
        logger.warning("JWT_SECRET is not set; tokens are signed with the default development secret")

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)

    app.state.settings = config
    app.state.users = UserStore()
    app.state.posts = PostStore()
    if config.seed_demo_data:
        seed_demo_data(app.state.users, app.state.posts, config)

    register_exception_handlers(app)

    app.include_router(pages.router, tags=["pages"])
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

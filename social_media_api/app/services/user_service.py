"""
Business logic for user accounts.

``UserService`` implements registration, login and profile lookup on
top of a ``UserStore``.  It raises the API error types from
``core.errors``; the endpoints only translate successful results into
response bodies.
"""

import logging
from typing import Tuple

from ..core.config import Settings
from ..core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from ..core.security import hash_password, issue_user_token, verify_password
from ..core.store import User, UserStore
from ..schemas.user import TokenIdentity, UserLogin, UserRead, UserRegister


logger = logging.getLogger(__name__)


class UserService:
    """Registration, login and profile operations for one ``UserStore``."""

    def __init__(self, users: UserStore, config: Settings) -> None:
        self.users = users
        self.config = config

    async def register(self, data: UserRegister) -> Tuple[str, UserRead]:
        """Create an account and return a session token with its public view.

        All three fields must be non-empty.  An existing account with the
        same email or the same username (exact, case-sensitive match)
        raises ``ConflictError``.
        """
        if not data.username or not data.email or not data.password:
            raise ValidationError("Please provide username, email, and password")
        password_hash = hash_password(data.password, self.config.password_hash_iterations)
        user = self.users.add_unique(data.username, data.email, password_hash)
        if user is None:
            logger.info("Registration refused for %s: account exists", data.email)
            raise ConflictError("User already exists")
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return self._issue(user), self._public(user)

    async def login(self, data: UserLogin) -> Tuple[str, UserRead]:
        """Check credentials and return a session token with the public view.

        Unknown email and wrong password produce the same error so the
        response does not reveal which accounts exist.
        """
        if not data.email or not data.password:
            raise ValidationError("Please provide email and password")
        user = self.users.find_by_email(data.email)
        if user is None or not verify_password(
            data.password, user.password_hash, self.config.password_hash_iterations
        ):
            logger.info("Failed login for %s", data.email)
            raise AuthError("Invalid credentials")
        return self._issue(user), self._public(user)

    async def get_profile(self, identity: TokenIdentity) -> UserRead:
        user = self.users.find_by_id(identity.id)
        if user is None:
            raise NotFoundError("User not found")
        return self._public(user)

    def _issue(self, user: User) -> str:
        return issue_user_token(user.id, user.username, self.config)

    @staticmethod
    def _public(user: User) -> UserRead:
        return UserRead(id=user.id, username=user.username, email=user.email)

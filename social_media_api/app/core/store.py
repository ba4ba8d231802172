"""
In-memory storage for users and posts.

Both stores are append-ordered lists addressed only by a sequential
integer ``id``.  Lookups are linear scans, which is fine for the small
collections this service holds.  Nothing is persisted: a restart starts
from an empty (or freshly seeded) store.

Each store owns a ``threading.Lock`` and every mutation, as well as any
read that must observe a consistent view, runs under it.  The stores
are created per application in ``main.create_app`` and reached from
handlers through ``api.deps``; there is no module-level instance.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from threading import Lock
from typing import Callable, List, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    id: int
    username: str
    email: str
    password_hash: str


@dataclass
class Post:
    id: int
    title: str
    content: str
    author: str
    author_id: Optional[int]
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserStore:
    """Ordered collection of user records."""

    def __init__(self) -> None:
        self._users: List[User] = []
        self._next_id = 1
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._users)

    def add(self, username: str, email: str, password_hash: str) -> User:
        with self._lock:
            return self._append(username, email, password_hash)

    def add_unique(self, username: str, email: str, password_hash: str) -> Optional[User]:
        """Append a user unless the email or username is already taken.

        The check and the append happen under one lock acquisition.
        Returns ``None`` when a matching record exists.
        """
        with self._lock:
            if self._find(lambda u: u.email == email or u.username == username):
                return None
            return self._append(username, email, password_hash)

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._find(lambda u: u.id == user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self._find(lambda u: u.email == email)

    def _find(self, predicate: Callable[[User], bool]) -> Optional[User]:
        return next((u for u in list(self._users) if predicate(u)), None)

    def _append(self, username: str, email: str, password_hash: str) -> User:
        user = User(id=self._next_id, username=username, email=email, password_hash=password_hash)
        self._next_id += 1
        self._users.append(user)
        return user


class PostStore:
    """Ordered collection of post records.

    Records handed out are copies, so callers never observe a post
    changing underneath them.
    """

    def __init__(self) -> None:
        self._posts: List[Post] = []
        self._next_id = 1
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._posts)

    def add(
        self,
        title: str,
        content: str,
        author: str,
        author_id: Optional[int],
        created_at: Optional[datetime] = None,
    ) -> Post:
        with self._lock:
            post = Post(
                id=self._next_id,
                title=title,
                content=content,
                author=author,
                author_id=author_id,
                created_at=created_at or utcnow(),
            )
            self._next_id += 1
            self._posts.append(post)
            return replace(post)

    def get(self, post_id: int) -> Optional[Post]:
        with self._lock:
            index = self._index_of(post_id)
            return replace(self._posts[index]) if index is not None else None

    def all(self) -> List[Post]:
        with self._lock:
            return [replace(p) for p in self._posts]

    def page(self, start: int, end: int) -> tuple[List[Post], int]:
        """Return ``posts[start:end]`` and the total count from one snapshot."""
        with self._lock:
            return [replace(p) for p in self._posts[start:end]], len(self._posts)

    def update(
        self,
        post_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Optional[Post]:
        """Overwrite the truthy fields given and stamp ``updated_at``.

        Returns the updated record, or ``None`` if ``post_id`` is unknown.
        """
        with self._lock:
            index = self._index_of(post_id)
            if index is None:
                return None
            post = self._posts[index]
            if title:
                post.title = title
            if content:
                post.content = content
            post.updated_at = utcnow()
            return replace(post)

    def remove(self, post_id: int) -> Optional[Post]:
        with self._lock:
            index = self._index_of(post_id)
            if index is None:
                return None
            return self._posts.pop(index)

    def _index_of(self, post_id: int) -> Optional[int]:
        for index, post in enumerate(self._posts):
            if post.id == post_id:
                return index
        return None

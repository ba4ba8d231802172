"""In-memory stores and the pagination parsing policy."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from social_media_api.app.core.store import PostStore, UserStore
from social_media_api.app.services.post_service import parse_int, parse_int_or_default


def test_user_store_lookup():
    users = UserStore()
    john = users.add("john", "john@example.com", "h")
    jane = users.add("jane", "jane@example.com", "h")
    assert (john.id, jane.id) == (1, 2)
    assert users.find_by_email("jane@example.com") == jane
    assert users.find_by_id(1) == john
    assert users.find_by_id(3) is None


def test_add_unique_rejects_email_or_username_match():
    users = UserStore()
    users.add("john", "john@example.com", "h")
    assert users.add_unique("john", "new@example.com", "h") is None
    assert users.add_unique("other", "john@example.com", "h") is None
    assert users.add_unique("other", "other@example.com", "h").id == 2


def test_concurrent_registrations_with_same_email_admit_one():
    users = UserStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda i: users.add_unique(f"user{i}", "same@example.com", "h"), range(32)))
    assert len([r for r in results if r is not None]) == 1
    assert len(users) == 1


def test_post_store_update_and_remove():
    posts = PostStore()
    first = posts.add("a", "b", "john", 1)
    posts.add("c", "d", "jane", 2)

    updated = posts.update(first.id, content="new")
    assert updated.title == "a"
    assert updated.content == "new"
    assert updated.updated_at is not None
    assert first.updated_at is None

    removed = posts.remove(first.id)
    assert removed.id == first.id
    assert posts.get(first.id) is None
    assert [p.id for p in posts.all()] == [2]
    assert posts.update(first.id, title="x") is None
    assert posts.remove(first.id) is None


def test_post_ids_are_not_reused():
    posts = PostStore()
    posts.add("a", "b", "john", 1)
    posts.remove(1)
    assert posts.add("c", "d", "john", 1).id == 2


def test_page_returns_slice_and_total():
    posts = PostStore()
    for i in range(4):
        posts.add(f"t{i}", "c", "john", 1)
    items, total = posts.page(2, 4)
    assert [p.title for p in items] == ["t2", "t3"]
    assert total == 4


@pytest.mark.parametrize(
    "raw, expected",
    [(None, None), ("", None), ("abc", None), ("3", 3), ("3abc", 3), (" 4", 4), ("-2", -2), ("1.9", 1)],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw, expected", [(None, 5), ("x", 5), ("0", 5), ("10", 10), ("-1", -1)])
def test_parse_int_or_default(raw, expected):
    assert parse_int_or_default(raw, 5) == expected

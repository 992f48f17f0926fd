"""Association replacement — round-trip, idempotence, atomicity, all-or-nothing.

The reconciler deletes then inserts inside one UnitOfWork. A fault injected
between the two phases must leave the committed association set untouched.
"""

import pytest
from sqlalchemy.exc import OperationalError

from routers.services.post_service import PostService
from storage.repositories.post_category_repository import PostCategoryRepository
from utils.errors import InternalError, PostNotFoundError, UnknownCategoryError

from helpers import association_count, category_ids_of, create_post


@pytest.fixture
async def post_service(session_factory):
    async with session_factory() as session:
        yield PostService(session, session_factory)


async def _update(service, post, category_ids, **overrides):
    return await service.update_post(
        post.id,
        title=overrides.get("title", post.title),
        content=overrides.get("content", post.content),
        cover_image_url=overrides.get("cover_image_url", post.cover_image_url),
        category_ids=category_ids,
    )


async def test_replace_round_trip(post_service, seed):
    """{A, B} -> [B, C] reads back as exactly {B, C}."""
    await _update(post_service, seed.post, [seed.b.id, seed.c.id])

    post = await post_service.get_post(seed.post.id)
    assert {c.id for c in post.categories} == {seed.b.id, seed.c.id}


async def test_replace_with_duplicates_stores_each_once(post_service, session_factory, seed):
    await _update(post_service, seed.post, [seed.c.id, seed.c.id, seed.a.id])

    assert await category_ids_of(session_factory, seed.post.id) == {seed.a.id, seed.c.id}
    assert await association_count(session_factory) == 2


async def test_replace_with_empty_set_clears_associations(post_service, session_factory, seed):
    await _update(post_service, seed.post, [])

    assert await category_ids_of(session_factory, seed.post.id) == set()


async def test_replace_is_idempotent(post_service, session_factory, seed):
    desired = [seed.a.id, seed.c.id]

    await _update(post_service, seed.post, desired)
    once = await category_ids_of(session_factory, seed.post.id)
    await _update(post_service, seed.post, desired)
    twice = await category_ids_of(session_factory, seed.post.id)

    assert once == twice == {seed.a.id, seed.c.id}
    assert await association_count(session_factory) == 2


async def test_update_replaces_fields_and_bumps_updated_at(post_service, seed):
    updated = await _update(
        post_service, seed.post, [seed.a.id],
        title="Renamed", content="New body", cover_image_url=None,
    )

    assert updated.title == "Renamed"
    assert updated.content == "New body"
    assert updated.cover_image_url is None
    assert updated.updated_at >= seed.post.updated_at


async def test_unknown_category_changes_nothing(post_service, session_factory, seed):
    with pytest.raises(UnknownCategoryError):
        await _update(post_service, seed.post, [seed.c.id, "nonexistent"], title="Changed")

    assert await category_ids_of(session_factory, seed.post.id) == {seed.a.id, seed.b.id}
    post = await post_service.get_post(seed.post.id)
    assert post.title == "First post"


async def test_fault_between_delete_and_insert_rolls_back(
    post_service, session_factory, seed, monkeypatch,
):
    """Simulated crash after the delete phase keeps the original set, never empty."""
    async def failing_insert(self, post_id, category_ids):
        raise RuntimeError("simulated fault after delete")

    monkeypatch.setattr(PostCategoryRepository, "add_associations", failing_insert)

    with pytest.raises(RuntimeError):
        await _update(post_service, seed.post, [seed.c.id], title="Half written")

    assert await category_ids_of(session_factory, seed.post.id) == {seed.a.id, seed.b.id}
    post = await post_service.get_post(seed.post.id)
    assert post.title == "First post"


async def test_store_failure_surfaces_as_internal_error(
    post_service, session_factory, seed, monkeypatch,
):
    async def broken_insert(self, post_id, category_ids):
        raise OperationalError("INSERT INTO post_categories", {}, Exception("connection lost"))

    monkeypatch.setattr(PostCategoryRepository, "add_associations", broken_insert)

    with pytest.raises(InternalError):
        await _update(post_service, seed.post, [seed.c.id])

    assert await category_ids_of(session_factory, seed.post.id) == {seed.a.id, seed.b.id}


async def test_missing_post_fails_without_leaving_associations(post_service, session_factory, seed):
    with pytest.raises(PostNotFoundError):
        await post_service.update_post(
            "deleted-post", title="x", content="", cover_image_url=None,
            category_ids=[seed.a.id],
        )

    assert await category_ids_of(session_factory, "deleted-post") == set()
    assert await association_count(session_factory) == 2


async def test_replace_categories_only(post_service, session_factory, seed):
    result = await post_service.replace_categories(seed.post.id, [seed.c.id, seed.c.id])

    assert result == [seed.c.id]
    assert await category_ids_of(session_factory, seed.post.id) == {seed.c.id}


async def test_delete_post_removes_associations(post_service, session_factory, seed):
    other = await create_post(session_factory, "Other", [seed.a.id])

    await post_service.delete_post(seed.post.id)

    with pytest.raises(PostNotFoundError):
        await post_service.get_post(seed.post.id)
    assert await category_ids_of(session_factory, seed.post.id) == set()
    assert await category_ids_of(session_factory, other.id) == {seed.a.id}


async def test_delete_missing_post(post_service):
    with pytest.raises(PostNotFoundError):
        await post_service.delete_post("missing")


async def test_create_post_validates_and_links(post_service, session_factory, seed):
    post = await post_service.create_post(
        title="New", content="Body", cover_image_url=None,
        category_ids=[seed.a.id, seed.a.id, seed.c.id],
    )

    assert await category_ids_of(session_factory, post.id) == {seed.a.id, seed.c.id}


async def test_create_post_with_unknown_category_creates_nothing(post_service, seed):
    with pytest.raises(UnknownCategoryError):
        await post_service.create_post(
            title="Ghost", content="", cover_image_url=None, category_ids=["nope"],
        )

    titles = [p.title for p in await post_service.list_posts()]
    assert "Ghost" not in titles

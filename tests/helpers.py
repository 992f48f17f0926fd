"""Test data builders that write through UnitOfWork, plus committed-state readers."""

from sqlalchemy import select

from storage import UnitOfWork
from storage.repositories import PostCategoryRepository
from storage.models import PostCategory


async def create_category(session_factory, name):
    async with UnitOfWork(session_factory) as uow:
        return await uow.categories.create(name=name)


async def create_post(session_factory, title, category_ids=(), created_at=None, **fields):
    async with UnitOfWork(session_factory) as uow:
        values = {"title": title, "content": fields.get("content", f"{title} body")}
        if "cover_image_url" in fields:
            values["cover_image_url"] = fields["cover_image_url"]
        if created_at is not None:
            values["created_at"] = created_at
        post = await uow.posts.create(**values)
        await uow.post_categories.add_associations(post.id, category_ids)
        return post


async def category_ids_of(session_factory, post_id):
    """Committed association set of a post, read through a fresh session."""
    async with session_factory() as session:
        return set(await PostCategoryRepository(session).get_category_ids_by_post_id(post_id))


async def association_count(session_factory):
    async with session_factory() as session:
        result = await session.execute(select(PostCategory.id))
        return len(result.all())

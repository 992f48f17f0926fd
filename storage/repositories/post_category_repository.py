"""
PostCategoryRepository - 文章分类关联Repository
"""
# 标准库导包
from typing import List, Iterable

# 第三方库导包
from sqlalchemy import select, delete, insert
from sqlalchemy.ext.asyncio import AsyncSession

# 项目内部导包
from storage.models.post_category import PostCategory
from storage.repositories.base import BaseRepository


class PostCategoryRepository(BaseRepository[PostCategory]):
    """文章分类关联Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, PostCategory)

    async def get_category_ids_by_post_id(self, post_id: str) -> List[str]:
        """
        根据文章ID获取所有分类ID

        Args:
            post_id: 文章ID

        Returns:
            分类ID列表
        """
        query = select(PostCategory.category_id).where(PostCategory.post_id == post_id)
        result = await self.session.execute(query)
        return [row[0] for row in result.all()]

    async def count_by_category_id(self, category_id: str) -> int:
        """统计引用某分类的关联数量"""
        return await self.count(category_id=category_id)

    async def delete_by_post_id(self, post_id: str) -> int:
        """
        删除指定文章的所有分类关联

        Args:
            post_id: 文章ID

        Returns:
            删除的关联数量
        """
        result = await self.session.execute(
            delete(PostCategory).where(PostCategory.post_id == post_id)
        )
        return result.rowcount

    async def add_associations(self, post_id: str, category_ids: Iterable[str]) -> int:
        """
        批量插入关联

        Args:
            post_id: 文章ID
            category_ids: 已去重的分类ID

        Returns:
            插入的关联数量
        """
        rows = [
            {"post_id": post_id, "category_id": category_id}
            for category_id in category_ids
        ]
        if not rows:
            return 0

        await self.session.execute(insert(PostCategory), rows)
        return len(rows)

    async def replace_associations(self, post_id: str, category_ids: Iterable[str]) -> int:
        """
        整体替换文章的分类关联

        先删除现有关联再插入新关联。两步必须运行在同一个未提交的事务中
        （见UnitOfWork），任何一步失败都会随事务一起回滚。

        Args:
            post_id: 文章ID
            category_ids: 已通过校验的分类ID

        Returns:
            新的关联数量
        """
        # 去重并保持顺序
        desired = list(dict.fromkeys(category_ids))

        await self.delete_by_post_id(post_id)
        added = await self.add_associations(post_id, desired)
        await self.session.flush()

        return added

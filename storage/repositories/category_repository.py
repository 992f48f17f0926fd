"""
CategoryRepository - 分类Repository
"""
# 标准库导包
from typing import Optional, List, Iterable, Set

# 第三方库导包
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# 项目内部导包
from storage.models.category import Category
from storage.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """分类Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Category)

    async def list_all(self) -> List[Category]:
        """
        获取全部分类，按创建时间升序

        Returns:
            分类列表
        """
        return await self.query_by_filters(filters={}, order_by="created_at", order_desc=False)

    async def get_existing_ids(self, category_ids: Iterable[str]) -> Set[str]:
        """
        批量查询给定ID中实际存在的分类ID

        Args:
            category_ids: 待查询的分类ID

        Returns:
            存在的分类ID集合
        """
        ids = list(category_ids)
        if not ids:
            return set()

        result = await self.session.execute(
            select(Category.id).where(Category.id.in_(ids))
        )
        return {row[0] for row in result.all()}

    async def get_by_name(self, name: str) -> Optional[Category]:
        """
        根据名称获取分类

        Args:
            name: 分类名称

        Returns:
            分类实例或None
        """
        results = await self.query_by_filters(filters={"name": name}, limit=1)
        return results[0] if results else None

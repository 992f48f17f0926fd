"""
PostRepository - 文章Repository
"""
# 标准库导包
from typing import Optional, List

# 第三方库导包
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

# 项目内部导包
from storage.models.post import Post
from storage.models.post_category import PostCategory
from storage.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """文章Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Post)

    def _with_categories(self):
        """带分类预加载的查询"""
        return (
            select(Post)
            .options(selectinload(Post.post_categories).selectinload(PostCategory.category))
            .execution_options(populate_existing=True)
        )

    async def get_with_categories(self, post_id: str) -> Optional[Post]:
        """
        获取文章及其分类

        Args:
            post_id: 文章ID

        Returns:
            文章实例或None
        """
        result = await self.session.execute(
            self._with_categories().where(Post.id == post_id)
        )
        return result.scalar_one_or_none()

    async def list_with_categories(self) -> List[Post]:
        """
        获取全部文章及其分类，按创建时间倒序

        过滤、排序和分页由列表查询服务完成

        Returns:
            文章列表
        """
        result = await self.session.execute(
            self._with_categories().order_by(Post.created_at.desc())
        )
        return list(result.scalars().all())

    async def update_fields(
        self,
        post_id: str,
        title: str,
        content: str,
        cover_image_url: Optional[str]
    ) -> Optional[Post]:
        """
        整体替换文章字段

        Args:
            post_id: 文章ID
            title: 标题
            content: 正文
            cover_image_url: 封面图URL

        Returns:
            更新后的文章实例，文章不存在时返回None
        """
        return await self.update_by_id(
            post_id,
            title=title,
            content=content,
            cover_image_url=cover_image_url
        )

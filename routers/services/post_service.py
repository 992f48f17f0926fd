"""
文章服务类
处理文章的查询、创建、更新、删除，以及文章与分类关联的整体替换
"""
# 标准库导包
import logging
from typing import Optional, List, Sequence

# 第三方库导包
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# 项目内部导包
from storage.models.post import Post
from storage.repositories.post_repository import PostRepository
from storage.unit_of_work import UnitOfWork
from routers.services.category_validation import validate_category_set
from utils.errors import InternalError, PostNotFoundError

# 配置日志
logger = logging.getLogger(__name__)


class PostService:
    """文章服务类"""

    def __init__(self, session: AsyncSession, session_factory: async_sessionmaker[AsyncSession]):
        """
        初始化文章服务

        Args:
            session: 请求级数据库会话，用于只读查询
            session_factory: 会话工厂，写操作在独立的UnitOfWork中执行
        """
        self.session = session
        self.session_factory = session_factory
        self.post_repo = PostRepository(session)

    async def get_post(self, post_id: str) -> Post:
        """
        获取文章及其分类

        Args:
            post_id: 文章ID

        Returns:
            Post实例

        Raises:
            PostNotFoundError: 文章不存在
        """
        post = await self.post_repo.get_with_categories(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        return post

    async def list_posts(self) -> List[Post]:
        """获取全部文章（含分类），按创建时间倒序"""
        return await self.post_repo.list_with_categories()

    async def create_post(
        self,
        title: str,
        content: str,
        cover_image_url: Optional[str],
        category_ids: Sequence[str]
    ) -> Post:
        """
        创建文章并关联分类

        Args:
            title: 标题
            content: 正文
            cover_image_url: 封面图URL
            category_ids: 分类ID（允许重复）

        Returns:
            创建的Post实例

        Raises:
            UnknownCategoryError: 分类ID无法解析
        """
        try:
            async with UnitOfWork(self.session_factory) as uow:
                valid_ids = await validate_category_set(uow.categories, category_ids)
                post = await uow.posts.create(
                    title=title,
                    content=content,
                    cover_image_url=cover_image_url
                )
                await uow.post_categories.add_associations(post.id, valid_ids)
        except SQLAlchemyError as e:
            logger.error(f"创建文章失败: {str(e)}")
            raise InternalError() from e

        logger.info(f"创建Post成功: post_id={post.id}, categories={len(valid_ids)}")
        return post

    async def update_post(
        self,
        post_id: str,
        title: str,
        content: str,
        cover_image_url: Optional[str],
        category_ids: Sequence[str]
    ) -> Post:
        """
        整体更新文章字段并替换分类关联

        校验、字段更新、关联替换在同一个事务里完成，
        任何一步失败都不会留下部分修改。

        Args:
            post_id: 文章ID
            title: 标题
            content: 正文
            cover_image_url: 封面图URL
            category_ids: 新的分类ID（允许重复）

        Returns:
            更新后的Post实例

        Raises:
            UnknownCategoryError: 分类ID无法解析
            PostNotFoundError: 文章不存在（包括并发删除）
            InternalError: 存储层失败
        """
        try:
            async with UnitOfWork(self.session_factory) as uow:
                valid_ids = await validate_category_set(uow.categories, category_ids)

                post = await uow.posts.update_fields(
                    post_id,
                    title=title,
                    content=content,
                    cover_image_url=cover_image_url
                )
                if not post:
                    raise PostNotFoundError(post_id)

                await uow.post_categories.replace_associations(post_id, valid_ids)
        except SQLAlchemyError as e:
            logger.error(f"更新文章失败: post_id={post_id}, error={str(e)}")
            raise InternalError() from e

        logger.info(f"更新Post成功: post_id={post_id}, categories={valid_ids}")
        return post

    async def replace_categories(self, post_id: str, category_ids: Sequence[str]) -> List[str]:
        """
        只替换文章的分类关联，不修改文章字段

        Args:
            post_id: 文章ID
            category_ids: 新的分类ID

        Returns:
            替换后的分类ID列表
        """
        try:
            async with UnitOfWork(self.session_factory) as uow:
                valid_ids = await validate_category_set(uow.categories, category_ids)
                if not await uow.posts.exists(id=post_id):
                    raise PostNotFoundError(post_id)
                await uow.post_categories.replace_associations(post_id, valid_ids)
        except SQLAlchemyError as e:
            logger.error(f"替换文章分类失败: post_id={post_id}, error={str(e)}")
            raise InternalError() from e

        return valid_ids

    async def delete_post(self, post_id: str) -> None:
        """
        删除文章

        先删除关联再删除文章，两步在同一个事务内

        Args:
            post_id: 文章ID

        Raises:
            PostNotFoundError: 文章不存在
        """
        try:
            async with UnitOfWork(self.session_factory) as uow:
                if not await uow.posts.exists(id=post_id):
                    raise PostNotFoundError(post_id)

                removed = await uow.post_categories.delete_by_post_id(post_id)
                if not await uow.posts.delete_by_id(post_id):
                    raise PostNotFoundError(post_id)
        except SQLAlchemyError as e:
            logger.error(f"删除文章失败: post_id={post_id}, error={str(e)}")
            raise InternalError() from e

        logger.info(f"删除Post成功: post_id={post_id}, removed_associations={removed}")

"""
分类服务类
处理分类的查询、创建和删除
"""
# 标准库导包
import logging
from typing import List

# 第三方库导包
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# 项目内部导包
from storage.models.category import Category
from storage.repositories.category_repository import CategoryRepository
from storage.unit_of_work import UnitOfWork
from utils.errors import (
    CategoryInUseError,
    CategoryNameConflictError,
    CategoryNotFoundError,
    InternalError
)

# 配置日志
logger = logging.getLogger(__name__)


class CategoryService:
    """分类服务类"""

    def __init__(self, session: AsyncSession, session_factory: async_sessionmaker[AsyncSession]):
        self.session = session
        self.session_factory = session_factory
        self.category_repo = CategoryRepository(session)

    async def list_categories(self) -> List[Category]:
        """获取全部分类，按创建时间升序"""
        return await self.category_repo.list_all()

    async def create_category(self, name: str) -> Category:
        """
        创建分类

        Args:
            name: 分类名称

        Returns:
            创建的Category实例

        Raises:
            CategoryNameConflictError: 名称已存在
        """
        try:
            async with UnitOfWork(self.session_factory) as uow:
                if await uow.categories.get_by_name(name):
                    raise CategoryNameConflictError(name)
                category = await uow.categories.create(name=name)
        except IntegrityError as e:
            # 并发创建同名分类时由唯一约束兜底
            logger.warning(f"分类名称冲突: name={name}, error={str(e)}")
            raise CategoryNameConflictError(name) from e
        except SQLAlchemyError as e:
            logger.error(f"创建分类失败: name={name}, error={str(e)}")
            raise InternalError() from e

        logger.info(f"创建Category成功: category_id={category.id}, name={name}")
        return category

    async def delete_category(self, category_id: str) -> None:
        """
        删除分类

        仍被文章引用的分类拒绝删除，不做级联

        Args:
            category_id: 分类ID

        Raises:
            CategoryNotFoundError: 分类不存在
            CategoryInUseError: 分类仍被引用
        """
        try:
            async with UnitOfWork(self.session_factory) as uow:
                if not await uow.categories.exists(id=category_id):
                    raise CategoryNotFoundError(category_id)

                usage_count = await uow.post_categories.count_by_category_id(category_id)
                if usage_count > 0:
                    logger.warning(f"分类仍被引用，拒绝删除: category_id={category_id}, usage={usage_count}")
                    raise CategoryInUseError(category_id, usage_count)

                await uow.categories.delete_by_id(category_id)
        except IntegrityError as e:
            # 检查之后又有文章关联了该分类，外键约束拒绝删除
            logger.warning(f"删除分类时外键冲突: category_id={category_id}, error={str(e)}")
            raise CategoryInUseError(category_id, usage_count=-1) from e
        except SQLAlchemyError as e:
            logger.error(f"删除分类失败: category_id={category_id}, error={str(e)}")
            raise InternalError() from e

        logger.info(f"删除Category成功: category_id={category_id}")

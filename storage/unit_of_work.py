"""
UnitOfWork - 显式事务边界

一个UnitOfWork对应一个数据库事务，写操作涉及的所有Repository
共享同一个会话，要么全部提交，要么全部回滚。
"""
# 标准库导包
import logging
from typing import Optional

# 第三方库导包
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# 项目内部导包
from storage.repositories.category_repository import CategoryRepository
from storage.repositories.post_repository import PostRepository
from storage.repositories.post_category_repository import PostCategoryRepository

# 配置日志
logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    事务工作单元

    用法:
        async with UnitOfWork(session_factory) as uow:
            await uow.posts.update_fields(...)
            await uow.post_categories.replace_associations(...)

    正常退出时提交，抛出异常时回滚并继续向上抛出。
    也可以在块内显式调用commit()/rollback()。
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        初始化工作单元

        Args:
            session_factory: 会话工厂
        """
        self._session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._finished = False

    async def begin(self) -> "UnitOfWork":
        """打开会话并开始事务"""
        self.session = self._session_factory()
        await self.session.begin()
        self._finished = False

        self.posts = PostRepository(self.session)
        self.categories = CategoryRepository(self.session)
        self.post_categories = PostCategoryRepository(self.session)
        return self

    async def commit(self):
        """提交事务"""
        await self.session.commit()
        self._finished = True

    async def rollback(self):
        """回滚事务"""
        await self.session.rollback()
        self._finished = True

    async def close(self):
        """关闭会话"""
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> "UnitOfWork":
        return await self.begin()

    async def __aexit__(self, exc_type, exc, tb):
        try:
            if exc_type is not None:
                logger.warning(f"事务回滚: {exc_type.__name__}: {exc}")
                await self.rollback()
            elif not self._finished:
                await self.commit()
        finally:
            await self.close()
        # 不吞掉异常
        return False

"""
Storage层包
提供数据库连接、模型、Repository和UnitOfWork的统一访问接口
"""
# 项目内部导包
from .database import (
    get_session,
    get_session_factory,
    init_db,
    cleanup_db,
    Base,
    engine,
    async_session_factory
)
from .models import (
    Category,
    Post,
    PostCategory
)
from .repositories import (
    BaseRepository,
    CategoryRepository,
    PostRepository,
    PostCategoryRepository
)
from .unit_of_work import UnitOfWork

__all__ = [
    # 数据库连接相关
    "get_session",
    "get_session_factory",
    "init_db",
    "cleanup_db",
    "Base",
    "engine",
    "async_session_factory",

    # 模型相关
    "Category",
    "Post",
    "PostCategory",

    # Repository相关
    "BaseRepository",
    "CategoryRepository",
    "PostRepository",
    "PostCategoryRepository",
    "UnitOfWork",
]

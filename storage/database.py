"""Database configuration module."""
# 标准库导包
import logging
from typing import AsyncGenerator, Dict, Any

# 第三方库导包
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

# 项目内部导包
from config import settings

# 配置日志
logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def get_database_url() -> str:
    """构建数据库URL"""
    if settings.DATABASE_URL:
        return settings.DATABASE_URL

    # 从HOST中分离主机和端口
    host_port = settings.DB_HOST
    if ':' in host_port:
        host, port = host_port.split(':')
    else:
        host = host_port
        port = "3306"

    # 构建异步MySQL URL
    database_url = f"mysql+aiomysql://{settings.DB_USER}:{settings.DB_PASSWORD}@{host}:{port}/{settings.DB_NAME}"
    return database_url


def _engine_options(database_url: str) -> Dict[str, Any]:
    """连接池参数，SQLite不使用队列连接池"""
    options: Dict[str, Any] = {
        "echo": settings.DEBUG,  # 调试模式下显示SQL语句
    }
    if database_url.startswith("sqlite"):
        return options

    options.update(
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_CONNECTIONS - settings.DB_POOL_SIZE,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        echo_pool=settings.DEBUG,  # 调试模式下显示连接池信息
    )
    return options


def create_engine_for_url(database_url: str, **overrides) -> AsyncEngine:
    """
    创建异步引擎

    SQLite默认不检查外键，这里在每个连接上打开外键约束，
    保证关联表不会出现悬空引用
    """
    options = _engine_options(database_url)
    options.update(overrides)
    new_engine = create_async_engine(database_url, **options)

    if database_url.startswith("sqlite"):
        @event.listens_for(new_engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """创建会话工厂"""
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )


# 获取数据库URL
DATABASE_URL = get_database_url()
if settings.DB_PASSWORD:
    logger.info(f"数据库连接URL: {DATABASE_URL.replace(settings.DB_PASSWORD, '***')}")

# 创建异步引擎
engine = create_engine_for_url(DATABASE_URL)

# 创建会话工厂
async_session_factory = create_session_factory(engine)


async def init_db():
    """初始化数据库，创建所有表"""
    # 导入模型以注册到元数据
    import storage.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("数据库表初始化完成")


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """获取数据库会话的异步生成器

    这是一个依赖注入函数，可以用于FastAPI的Depends。
    只读查询使用该会话；写操作通过UnitOfWork显式控制事务。

    Yields:
        AsyncSession: 数据库会话对象
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"数据库会话发生错误: {str(e)}")
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """获取会话工厂，供UnitOfWork使用的依赖注入函数"""
    return async_session_factory


async def cleanup_db():
    """清理数据库连接"""
    await engine.dispose()
    logger.info("数据库连接已关闭")

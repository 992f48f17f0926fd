"""
分类ID校验
在任何写操作之前确认提交的分类ID全部存在
"""
# 标准库导包
import logging
from typing import List, Sequence

# 项目内部导包
from storage.repositories.category_repository import CategoryRepository
from utils.errors import UnknownCategoryError

# 配置日志
logger = logging.getLogger(__name__)


async def validate_category_set(
    category_repo: CategoryRepository,
    category_ids: Sequence[str]
) -> List[str]:
    """
    校验分类ID集合

    允许重复ID，返回去重后的结果（保留首次出现的顺序）。
    所有ID通过一次批量查询解析，只要有一个不存在就整体失败，不做部分通过。
    本函数没有副作用。

    Args:
        category_repo: 分类Repository
        category_ids: 提交的分类ID

    Returns:
        去重后的分类ID列表

    Raises:
        UnknownCategoryError: 存在无法解析的分类ID
    """
    unique_ids = list(dict.fromkeys(category_ids))
    if not unique_ids:
        return []

    existing = await category_repo.get_existing_ids(unique_ids)
    missing = [category_id for category_id in unique_ids if category_id not in existing]

    if missing:
        logger.warning(f"分类ID校验失败: missing={missing}")
        raise UnknownCategoryError(missing)

    return unique_ids

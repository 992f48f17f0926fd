"""
分类公开路由
"""
# 标准库导包
import logging
from typing import List

# 第三方库导包
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# 项目内部导包
from models import CategoryResponse
from storage.database import get_session, get_session_factory
from routers.services.category_service import CategoryService
from routers.utils import category_to_response

# 配置日志
logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(
    prefix="/categories",
    tags=["分类"]
)


@router.get("", response_model=List[CategoryResponse], summary="获取分类列表")
async def list_categories(
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    获取全部分类，按创建时间升序
    """
    try:
        category_service = CategoryService(session, session_factory)
        categories = await category_service.list_categories()
        return [category_to_response(category) for category in categories]

    except Exception as e:
        logger.error(f"获取分类列表失败: {str(e)}")
        raise HTTPException(status_code=500, detail="カテゴリ一覧の取得に失敗しました")

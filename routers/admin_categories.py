"""
分类管理路由
"""
# 标准库导包
import logging

# 第三方库导包
from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# 项目内部导包
from models import (
    CategoryListPageResponse,
    CategoryResponse,
    CreateCategoryRequest,
    MessageResponse
)
from storage.database import get_session, get_session_factory
from routers.services.category_service import CategoryService
from routers.services.list_query_service import ListQuery, query_categories
from routers.utils import category_to_response
from utils.errors import ContentError

# 配置日志
logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(
    prefix="/admin/categories",
    tags=["分类管理"]
)


@router.get("", response_model=CategoryListPageResponse, summary="管理后台分类列表")
async def list_admin_categories(
    search_term: str = Query("", alias="searchTerm", description="名称搜索词"),
    page: int = Query(1, ge=1, description="页码，从1开始"),
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    try:
        category_service = CategoryService(session, session_factory)
        categories = await category_service.list_categories()
        result = query_categories(categories, ListQuery(search_term=search_term, page=page))

        return CategoryListPageResponse(
            items=[category_to_response(category) for category in result.items],
            total_pages=result.total_pages,
            total=result.total,
            page=result.page
        )

    except Exception as e:
        logger.error(f"获取管理分类列表失败: {str(e)}")
        raise HTTPException(status_code=500, detail="カテゴリ一覧の取得に失敗しました")


@router.post("", response_model=CategoryResponse, status_code=201, summary="创建分类")
async def create_category(
    request: CreateCategoryRequest,
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    try:
        category_service = CategoryService(session, session_factory)
        category = await category_service.create_category(request.name)
        return category_to_response(category)

    except ContentError:
        raise
    except Exception as e:
        logger.error(f"创建分类失败: {str(e)}")
        raise HTTPException(status_code=500, detail="カテゴリの作成に失敗しました")


@router.delete("/{category_id}", response_model=MessageResponse, summary="删除分类")
async def delete_category(
    category_id: str,
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    删除分类

    仍被文章使用的分类返回409，不会级联删除关联
    """
    try:
        category_service = CategoryService(session, session_factory)
        await category_service.delete_category(category_id)
        return MessageResponse(message="カテゴリを削除しました")

    except ContentError:
        raise
    except Exception as e:
        logger.error(f"删除分类失败: category_id={category_id}, error={str(e)}")
        raise HTTPException(status_code=500, detail="カテゴリの削除に失敗しました")

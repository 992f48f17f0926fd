"""
文章管理路由
提供管理后台的文章列表、创建、编辑、删除接口
"""
# 标准库导包
import logging

# 第三方库导包
from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# 项目内部导包
from models import (
    AdminPostResponse,
    MessageResponse,
    PostListPageResponse,
    PostSummaryResponse,
    PostWriteRequest
)
from storage.database import get_session, get_session_factory
from routers.services.post_service import PostService
from routers.services.list_query_service import ListQuery, SortKey, ViewMode, query_posts
from routers.utils import post_to_admin, post_to_admin_list_item, post_to_summary
from utils.errors import ContentError

# 配置日志
logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(
    prefix="/admin/posts",
    tags=["文章管理"]
)


@router.get("", response_model=PostListPageResponse, summary="管理后台文章列表")
async def list_admin_posts(
    search_term: str = Query("", alias="searchTerm", description="标题搜索词，大小写不敏感"),
    sort_key: SortKey = Query(SortKey.NEW, alias="sortKey", description="排序：new/old/title"),
    page: int = Query(1, ge=1, description="页码，从1开始"),
    view_mode: ViewMode = Query(ViewMode.LIST, alias="viewMode", description="展示方式：list/grid"),
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    搜索、排序、分页后的文章列表

    每次请求都基于最新数据重新计算
    """
    try:
        query = ListQuery(
            search_term=search_term,
            sort_key=sort_key,
            page=page,
            view_mode=view_mode
        )

        post_service = PostService(session, session_factory)
        posts = await post_service.list_posts()
        result = query_posts(posts, query)

        return PostListPageResponse(
            items=[post_to_admin_list_item(post) for post in result.items],
            total_pages=result.total_pages,
            total=result.total,
            page=result.page
        )

    except Exception as e:
        logger.error(f"获取管理文章列表失败: {str(e)}")
        raise HTTPException(status_code=500, detail="投稿一覧の取得に失敗しました")


@router.post("", response_model=PostSummaryResponse, status_code=201, summary="创建文章")
async def create_post(
    request: PostWriteRequest,
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    创建文章并关联分类
    """
    try:
        post_service = PostService(session, session_factory)
        post = await post_service.create_post(
            title=request.title,
            content=request.content,
            cover_image_url=request.cover_image_url,
            category_ids=request.category_ids
        )
        return post_to_summary(post)

    except ContentError:
        raise
    except Exception as e:
        logger.error(f"创建文章失败: {str(e)}")
        raise HTTPException(status_code=500, detail="投稿記事の作成に失敗しました")


@router.get("/{post_id}", response_model=AdminPostResponse, summary="获取编辑用文章")
async def get_admin_post(
    post_id: str,
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    获取编辑用的文章数据
    """
    try:
        post_service = PostService(session, session_factory)
        post = await post_service.get_post(post_id)
        return post_to_admin(post)

    except ContentError:
        raise
    except Exception as e:
        logger.error(f"获取编辑用文章失败: post_id={post_id}, error={str(e)}")
        raise HTTPException(status_code=500, detail="投稿記事の取得に失敗しました")


@router.put("/{post_id}", response_model=PostSummaryResponse, summary="更新文章")
async def update_post(
    post_id: str,
    request: PostWriteRequest,
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    整体更新文章字段并替换分类

    分类ID不存在返回400，文章不存在返回404，均不产生任何修改
    """
    try:
        post_service = PostService(session, session_factory)
        post = await post_service.update_post(
            post_id,
            title=request.title,
            content=request.content,
            cover_image_url=request.cover_image_url,
            category_ids=request.category_ids
        )
        return post_to_summary(post)

    except ContentError:
        raise
    except Exception as e:
        logger.error(f"更新文章失败: post_id={post_id}, error={str(e)}")
        raise HTTPException(status_code=500, detail="投稿記事の更新に失敗しました")


@router.delete("/{post_id}", response_model=MessageResponse, summary="删除文章")
async def delete_post(
    post_id: str,
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    删除文章及其全部分类关联
    """
    try:
        post_service = PostService(session, session_factory)
        await post_service.delete_post(post_id)
        return MessageResponse(message="投稿を削除しました")

    except ContentError:
        raise
    except Exception as e:
        logger.error(f"删除文章失败: post_id={post_id}, error={str(e)}")
        raise HTTPException(status_code=500, detail="投稿記事の削除に失敗しました")

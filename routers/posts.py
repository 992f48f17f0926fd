"""
文章公开路由
提供文章列表与详情的只读接口
"""
# 标准库导包
import logging
from typing import List

# 第三方库导包
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# 项目内部导包
from models import PostDetailResponse, PublicPostResponse
from storage.database import get_session, get_session_factory
from routers.services.post_service import PostService
from routers.utils import post_to_detail, post_to_public_item
from utils.errors import ContentError

# 配置日志
logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(
    prefix="/posts",
    tags=["文章"]
)


@router.get("", response_model=List[PublicPostResponse], summary="获取文章列表")
async def list_posts(
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    获取全部文章，按创建时间倒序
    """
    try:
        post_service = PostService(session, session_factory)
        posts = await post_service.list_posts()
        return [post_to_public_item(post) for post in posts]

    except Exception as e:
        logger.error(f"获取文章列表失败: {str(e)}")
        raise HTTPException(status_code=500, detail="投稿記事の取得に失敗しました")


@router.get("/{post_id}", response_model=PostDetailResponse, summary="获取文章详情")
async def get_post(
    post_id: str,
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory)
):
    """
    获取文章详情，包含封面图和分类
    """
    try:
        post_service = PostService(session, session_factory)
        post = await post_service.get_post(post_id)
        return post_to_detail(post)

    except ContentError:
        raise
    except Exception as e:
        logger.error(f"获取文章详情失败: post_id={post_id}, error={str(e)}")
        raise HTTPException(status_code=500, detail="投稿記事の取得に失敗しました")

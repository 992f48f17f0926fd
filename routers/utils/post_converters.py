"""
响应转换工具函数
将ORM模型转换为接口响应模型
"""
# 项目内部导包
from config import settings
from models import (
    AdminPostListItem,
    AdminPostResponse,
    CategoryRef,
    CategoryResponse,
    CoverImage,
    PostDetailResponse,
    PostSummaryResponse,
    PublicPostResponse
)


def category_refs(post) -> list:
    """文章的分类引用列表"""
    return [CategoryRef(id=c.id, name=c.name) for c in post.categories]


def cover_image(post) -> CoverImage:
    """封面图，尺寸为固定值"""
    return CoverImage(
        url=post.cover_image_url,
        width=settings.COVER_IMAGE_WIDTH,
        height=settings.COVER_IMAGE_HEIGHT
    )


def post_to_detail(post) -> PostDetailResponse:
    """
    将Post模型转换为公开详情响应

    Args:
        post: 已加载分类的Post实例

    Returns:
        PostDetailResponse对象
    """
    return PostDetailResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        cover_image=cover_image(post),
        categories=category_refs(post)
    )


def post_to_public_item(post) -> PublicPostResponse:
    """将Post模型转换为公开列表项"""
    return PublicPostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        cover_image=cover_image(post),
        categories=category_refs(post),
        created_at=post.created_at
    )


def post_to_admin(post) -> AdminPostResponse:
    """将Post模型转换为编辑用响应"""
    return AdminPostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        cover_image_url=post.cover_image_url,
        categories=category_refs(post)
    )


def post_to_admin_list_item(post) -> AdminPostListItem:
    """将Post模型转换为管理列表项"""
    return AdminPostListItem(
        id=post.id,
        title=post.title,
        created_at=post.created_at,
        categories=category_refs(post)
    )


def post_to_summary(post) -> PostSummaryResponse:
    """将Post模型转换为写操作后的摘要"""
    return PostSummaryResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        cover_image_url=post.cover_image_url,
        created_at=post.created_at,
        updated_at=post.updated_at
    )


def category_to_response(category) -> CategoryResponse:
    """将Category模型转换为响应"""
    return CategoryResponse(
        id=category.id,
        name=category.name,
        created_at=category.created_at
    )

"""
数据模型定义
API边界的请求/响应模型，字段名按前端约定使用驼峰别名
"""
# 标准库导包
from typing import Optional, List
from datetime import datetime

# 第三方库导包
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApiModel(BaseModel):
    """允许按字段名或别名构造的基础模型"""
    model_config = ConfigDict(populate_by_name=True)


# ========== 分类相关模型 ==========

class CategoryRef(ApiModel):
    """文章中引用的分类"""
    id: str
    name: str


class CategoryResponse(ApiModel):
    """分类响应模型"""
    id: str
    name: str
    created_at: datetime = Field(..., alias="createdAt")


class CreateCategoryRequest(ApiModel):
    """创建分类请求模型"""
    name: str = Field(..., min_length=1, max_length=100, description="分类名称")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class CategoryListPageResponse(ApiModel):
    """分类管理列表响应模型"""
    items: List[CategoryResponse]
    total_pages: int = Field(..., alias="totalPages")
    total: int
    page: int


# ========== 文章相关模型 ==========

class CoverImage(ApiModel):
    """封面图"""
    url: Optional[str] = None
    width: int
    height: int


class PostDetailResponse(ApiModel):
    """公开文章详情响应模型"""
    id: str
    title: str
    content: str
    cover_image: CoverImage = Field(..., alias="coverImage")
    categories: List[CategoryRef] = Field(default_factory=list)


class PublicPostResponse(PostDetailResponse):
    """公开文章列表项"""
    created_at: datetime = Field(..., alias="createdAt")


class AdminPostResponse(ApiModel):
    """管理后台编辑用文章响应模型"""
    id: str
    title: str
    content: str
    cover_image_url: Optional[str] = Field(None, alias="coverImageURL")
    categories: List[CategoryRef] = Field(default_factory=list)


class PostSummaryResponse(ApiModel):
    """创建/更新后返回的文章摘要"""
    id: str
    title: str
    content: str
    cover_image_url: Optional[str] = Field(None, alias="coverImageURL")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class AdminPostListItem(ApiModel):
    """管理后台文章列表项"""
    id: str
    title: str
    created_at: datetime = Field(..., alias="createdAt")
    categories: List[CategoryRef] = Field(default_factory=list)


class PostListPageResponse(ApiModel):
    """管理后台文章列表响应模型"""
    items: List[AdminPostListItem]
    total_pages: int = Field(..., alias="totalPages")
    total: int
    page: int


class PostWriteRequest(ApiModel):
    """
    创建/更新文章请求模型

    只做结构校验（类型、非空），分类ID是否存在由服务层校验
    """
    title: str = Field(..., min_length=1, max_length=200, description="标题")
    content: str = Field(..., description="正文")
    cover_image_url: Optional[str] = Field(None, alias="coverImageURL", description="封面图URL")
    category_ids: List[str] = Field(..., alias="categoryIds", description="分类ID列表")

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


class MessageResponse(ApiModel):
    """操作结果响应模型"""
    message: str

"""
Storage repositories package.
"""
# 项目内部导包
from .base import BaseRepository
from .category_repository import CategoryRepository
from .post_repository import PostRepository
from .post_category_repository import PostCategoryRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "PostRepository",
    "PostCategoryRepository",
]

"""
Storage models package.
"""
# 项目内部导包
from .category import Category
from .post import Post
from .post_category import PostCategory

__all__ = [
    "Category",
    "Post",
    "PostCategory",
]

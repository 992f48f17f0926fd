"""
Services layer
业务逻辑层
"""

from .post_service import PostService
from .category_service import CategoryService
from .category_validation import validate_category_set

__all__ = [
    "PostService",
    "CategoryService",
    "validate_category_set"
]

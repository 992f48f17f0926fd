"""
Utils layer
工具函数层
"""

from .post_converters import (
    category_to_response,
    post_to_admin,
    post_to_admin_list_item,
    post_to_detail,
    post_to_public_item,
    post_to_summary
)

__all__ = [
    "category_to_response",
    "post_to_admin",
    "post_to_admin_list_item",
    "post_to_detail",
    "post_to_public_item",
    "post_to_summary"
]

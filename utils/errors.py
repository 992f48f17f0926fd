"""
业务错误定义
服务层抛出带类型的错误，API层统一映射为状态码和提示信息
"""
# 标准库导包
from typing import Iterable, List


class ContentError(Exception):
    """业务错误基类"""

    http_status: int = 500
    kind: str = "internal"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ========== NotFound ==========

class NotFoundError(ContentError):
    """引用的资源不存在"""
    http_status = 404
    kind = "not_found"


class PostNotFoundError(NotFoundError):
    """文章不存在"""

    def __init__(self, post_id: str):
        super().__init__("投稿が見つかりません")
        self.post_id = post_id


class CategoryNotFoundError(NotFoundError):
    """分类不存在"""

    def __init__(self, category_id: str):
        super().__init__("カテゴリが見つかりません")
        self.category_id = category_id


# ========== ValidationFailed ==========

class ValidationFailedError(ContentError):
    """输入校验失败"""
    http_status = 400
    kind = "validation_failed"


class UnknownCategoryError(ValidationFailedError):
    """提交的分类ID中存在无法解析的ID"""

    def __init__(self, missing_ids: Iterable[str]):
        self.missing_ids: List[str] = list(missing_ids)
        super().__init__("存在しないカテゴリIDが含まれています")


# ========== Conflict ==========

class ConflictError(ContentError):
    """因现有引用或唯一约束而无法执行"""
    http_status = 409
    kind = "conflict"


class CategoryInUseError(ConflictError):
    """分类仍被文章引用，拒绝删除"""

    def __init__(self, category_id: str, usage_count: int):
        super().__init__("このカテゴリは投稿で使用されているため削除できません")
        self.category_id = category_id
        self.usage_count = usage_count


class CategoryNameConflictError(ConflictError):
    """分类名称重复"""

    def __init__(self, name: str):
        super().__init__("同じ名前のカテゴリが既に存在します")
        self.name = name


# ========== Internal ==========

class InternalError(ContentError):
    """存储或未知错误，对外只返回通用提示"""
    http_status = 500
    kind = "internal"

    def __init__(self, message: str = "サーバーエラーが発生しました"):
        super().__init__(message)

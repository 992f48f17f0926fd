"""
列表查询服务
为管理后台提供文章/分类的搜索、排序、分页视图

所有函数都是纯函数：输入已加载的记录和查询参数，输出当前页数据，
每次请求重新计算，不做缓存。
"""
# 标准库导包
import math
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, List, Sequence, Tuple, TypeVar

# 第三方库导包
from pydantic import BaseModel, ConfigDict, Field

# 项目内部导包
from config import settings

T = TypeVar("T")

# 片假名与平假名的码位差
_KATAKANA_START = 0x30A1
_KATAKANA_END = 0x30F6
_KANA_OFFSET = 0x60


class SortKey(str, Enum):
    """文章排序方式"""
    NEW = "new"
    OLD = "old"
    TITLE = "title"


class ViewMode(str, Enum):
    """列表展示方式，仅供前端使用，不影响查询结果"""
    LIST = "list"
    GRID = "grid"


class ListQuery(BaseModel):
    """列表视图查询参数"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search_term: str = Field(default="", alias="searchTerm")
    sort_key: SortKey = Field(default=SortKey.NEW, alias="sortKey")
    page: int = Field(default=1, ge=1)
    view_mode: ViewMode = Field(default=ViewMode.LIST, alias="viewMode")

    def with_search_term(self, search_term: str) -> "ListQuery":
        """修改搜索词，页码重置为1"""
        return self.model_copy(update={"search_term": search_term, "page": 1})

    def with_sort_key(self, sort_key: SortKey) -> "ListQuery":
        """修改排序方式，页码重置为1"""
        return self.model_copy(update={"sort_key": SortKey(sort_key), "page": 1})

    def with_page(self, page: int) -> "ListQuery":
        """翻页"""
        return self.model_copy(update={"page": max(1, page)})


@dataclass
class QueryPage(Generic[T]):
    """一页查询结果"""
    items: List[T] = field(default_factory=list)
    total_pages: int = 0
    total: int = 0
    page: int = 1


def matches_term(text: str, term: str) -> bool:
    """大小写不敏感的子串匹配，空搜索词匹配全部"""
    if not term:
        return True
    return term.casefold() in (text or "").casefold()


def filter_items(items: Sequence[T], term: str, text_of: Callable[[T], str]) -> List[T]:
    """按搜索词过滤"""
    return [item for item in items if matches_term(text_of(item), term)]


def title_sort_key(title: str) -> Tuple[str, str]:
    """
    标题的本地化排序键

    第一键：NFKC归一化全角/半角，casefold忽略大小写，片假名折叠为平假名，
    使「カ」与「か」相邻排序。
    第二键：仅大小写或假名种类不同时，小写在大写之前、平假名在片假名之前。
    """
    normalized = unicodedata.normalize("NFKC", title or "")
    folded = "".join(
        chr(ord(ch) - _KANA_OFFSET) if _KATAKANA_START <= ord(ch) <= _KATAKANA_END else ch
        for ch in normalized.casefold()
    )
    return folded, normalized.swapcase()


def sort_posts(posts: Sequence[T], sort_key: SortKey) -> List[T]:
    """
    文章排序

    Python的sorted是稳定排序，排序键相同的元素保持原有相对顺序

    Args:
        posts: 文章列表（需要有created_at和title属性）
        sort_key: 排序方式

    Returns:
        排序后的新列表
    """
    sort_key = SortKey(sort_key)
    if sort_key == SortKey.NEW:
        return sorted(posts, key=lambda p: p.created_at, reverse=True)
    if sort_key == SortKey.OLD:
        return sorted(posts, key=lambda p: p.created_at)
    return sorted(posts, key=lambda p: title_sort_key(p.title))


def total_pages_for(count: int, page_size: int) -> int:
    """总页数 = ceil(数量 / 每页数量)"""
    return math.ceil(count / page_size) if count else 0


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """
    取第page页（从1开始），超出范围返回空列表

    Args:
        items: 已过滤排序的数据
        page: 页码
        page_size: 每页数量

    Returns:
        当前页数据
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def query_posts(posts: Sequence[T], query: ListQuery, page_size: int = None) -> QueryPage[T]:
    """
    文章列表视图：按标题过滤 -> 排序 -> 分页

    Args:
        posts: 全部文章
        query: 查询参数
        page_size: 每页数量，默认取配置

    Returns:
        当前页结果
    """
    page_size = page_size or settings.ADMIN_PAGE_SIZE
    filtered = filter_items(posts, query.search_term, lambda p: p.title)
    ordered = sort_posts(filtered, query.sort_key)
    return QueryPage(
        items=paginate(ordered, query.page, page_size),
        total_pages=total_pages_for(len(ordered), page_size),
        total=len(ordered),
        page=query.page
    )


def query_categories(categories: Sequence[T], query: ListQuery, page_size: int = None) -> QueryPage[T]:
    """
    分类列表视图：按名称过滤 -> 分页，保持输入顺序

    Args:
        categories: 全部分类
        query: 查询参数（sort_key对分类无效）
        page_size: 每页数量，默认取配置

    Returns:
        当前页结果
    """
    page_size = page_size or settings.ADMIN_PAGE_SIZE
    filtered = filter_items(categories, query.search_term, lambda c: c.name)
    return QueryPage(
        items=paginate(filtered, query.page, page_size),
        total_pages=total_pages_for(len(filtered), page_size),
        total=len(filtered),
        page=query.page
    )

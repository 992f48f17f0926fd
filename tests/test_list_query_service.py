"""List/query service — pure filter, sort and paginate over in-memory records."""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from routers.services.list_query_service import (
    ListQuery,
    SortKey,
    filter_items,
    paginate,
    query_categories,
    query_posts,
    sort_posts,
    title_sort_key,
    total_pages_for,
)

BASE = datetime(2024, 5, 1, 9, 0, 0)


def make_post(title, minutes=0, id=None):
    return SimpleNamespace(id=id or title, title=title, created_at=BASE + timedelta(minutes=minutes))


def make_posts(count):
    return [make_post(f"Post {i:02d}", minutes=i) for i in range(count)]


class TestFilter:

    @pytest.mark.parametrize("term", ["", "post", "POST", "Hello", "wor", "xyz"])
    def test_every_result_contains_term_case_insensitively(self, term):
        posts = [make_post("Hello World"), make_post("Another post"), make_post("POSTSCRIPT")]

        result = filter_items(posts, term, lambda p: p.title)

        assert all(term.lower() in p.title.lower() for p in result)
        expected = [p for p in posts if term.lower() in p.title.lower()]
        assert result == expected

    def test_empty_term_matches_everything(self):
        posts = make_posts(5)
        assert filter_items(posts, "", lambda p: p.title) == posts


class TestSort:

    def test_newest_first_is_default(self):
        posts = [make_post("a", 1), make_post("b", 3), make_post("c", 2)]

        result = query_posts(posts, ListQuery()).items

        assert [p.title for p in result] == ["b", "c", "a"]

    def test_oldest_first(self):
        posts = [make_post("a", 1), make_post("b", 3), make_post("c", 2)]

        result = sort_posts(posts, SortKey.OLD)

        assert [p.title for p in result] == ["a", "c", "b"]

    def test_title_sort_ignores_case_and_width(self):
        posts = [make_post("banana"), make_post("Apple"), make_post("ｃherry")]

        result = sort_posts(posts, SortKey.TITLE)

        assert [p.title for p in result] == ["Apple", "banana", "ｃherry"]

    def test_title_sort_groups_katakana_with_hiragana(self):
        assert title_sort_key("カメラ")[0] == title_sort_key("かめら")[0]
        posts = [make_post("さくら"), make_post("カメラ"), make_post("あめ")]

        result = sort_posts(posts, SortKey.TITLE)

        assert [p.title for p in result] == ["あめ", "カメラ", "さくら"]

    @pytest.mark.parametrize("titles, expected", [
        (["Apple", "apple"], ["apple", "Apple"]),
        (["apple", "Apple"], ["apple", "Apple"]),
        (["カメラ", "かめら"], ["かめら", "カメラ"]),
        (["かめら", "カメラ"], ["かめら", "カメラ"]),
    ])
    def test_case_and_kana_variants_sort_deterministically(self, titles, expected):
        posts = [make_post(t) for t in titles]

        result = sort_posts(posts, SortKey.TITLE)

        assert [p.title for p in result] == expected

    def test_title_sort_is_stable(self):
        first = make_post("Same", id="first")
        second = make_post("Same", id="second")
        posts = [make_post("Zed"), first, make_post("Alpha"), second]

        once = sort_posts(posts, SortKey.TITLE)
        twice = sort_posts(once, SortKey.TITLE)

        same = [p.id for p in twice if p.title == "Same"]
        assert same == ["first", "second"]

    def test_equal_timestamps_keep_prior_order(self):
        posts = [make_post("x", 0, id="1"), make_post("y", 0, id="2"), make_post("z", 0, id="3")]

        assert [p.id for p in sort_posts(posts, SortKey.NEW)] == ["1", "2", "3"]
        assert [p.id for p in sort_posts(posts, SortKey.OLD)] == ["1", "2", "3"]


class TestPaginate:

    def test_seventeen_items_make_three_pages(self):
        posts = make_posts(17)

        page1 = query_posts(posts, ListQuery(page=1))
        page3 = query_posts(posts, ListQuery(page=3))

        assert len(page1.items) == 8
        assert len(page3.items) == 1
        assert page1.total_pages == page3.total_pages == 3
        assert page1.total == 17

    @pytest.mark.parametrize("count", [0, 1, 7, 8, 9, 16, 17, 24])
    def test_total_pages_is_ceiling(self, count):
        result = query_posts(make_posts(count), ListQuery())
        assert result.total_pages == -(-count // 8)

    def test_page_past_the_end_is_empty(self):
        posts = make_posts(17)
        result = query_posts(posts, ListQuery(page=4))

        assert result.items == []
        assert result.total_pages == 3

    def test_pages_cover_everything_once(self):
        posts = make_posts(17)
        seen = []
        for page in range(1, 4):
            seen.extend(p.id for p in query_posts(posts, ListQuery(page=page)).items)

        assert sorted(seen) == sorted(p.id for p in posts)

    def test_custom_page_size(self):
        assert paginate(list(range(10)), 2, 4) == [4, 5, 6, 7]
        assert total_pages_for(10, 4) == 3

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError):
            paginate([1, 2, 3], 0, 8)
        with pytest.raises(ValidationError):
            ListQuery(page=0)


class TestListQuery:

    def test_changing_search_term_resets_page(self):
        query = ListQuery(page=3, sort_key=SortKey.TITLE)

        changed = query.with_search_term("news")

        assert changed.page == 1
        assert changed.search_term == "news"
        assert changed.sort_key == SortKey.TITLE
        assert query.page == 3

    def test_changing_sort_key_resets_page(self):
        assert ListQuery(page=2).with_sort_key("old").page == 1

    def test_with_page_moves_and_clamps(self):
        query = ListQuery(search_term="news", sort_key=SortKey.OLD)

        assert query.with_page(3).page == 3
        assert query.with_page(3).search_term == "news"
        assert query.with_page(3).sort_key == SortKey.OLD
        assert query.with_page(0).page == 1
        assert query.with_page(-5).page == 1

    def test_accepts_camel_case_aliases(self):
        query = ListQuery.model_validate({"searchTerm": "a", "sortKey": "title", "page": 2})

        assert query.search_term == "a"
        assert query.sort_key == SortKey.TITLE
        assert query.model_dump(by_alias=True)["searchTerm"] == "a"


def test_query_categories_filters_by_name_and_keeps_order():
    categories = [SimpleNamespace(id=str(i), name=name) for i, name in enumerate(["Tech", "Diary", "tech talk"])]

    result = query_categories(categories, ListQuery(search_term="TECH"))

    assert [c.name for c in result.items] == ["Tech", "tech talk"]
    assert result.total_pages == 1

from __future__ import annotations

import pytest

from newsq.errors import InvalidQuery, MissingQuery
from newsq.news.normalize import (
    CATEGORIES,
    COUNTRIES,
    LANGUAGES,
    SEARCH_IN_FIELDS,
    filter_tokens,
    join_free_tokens,
    normalize_date_range,
    normalize_page,
    normalize_page_size,
    normalize_sort_by,
    normalize_text,
)


def test_allow_list_sizes() -> None:
    assert len(LANGUAGES) == 14
    assert len(CATEGORIES) == 7
    assert len(COUNTRIES) == 54
    assert SEARCH_IN_FIELDS == ("title", "description", "content")


def test_normalize_text_trims() -> None:
    assert normalize_text("  apple pie \n") == "apple pie"


def test_normalize_text_missing() -> None:
    with pytest.raises(MissingQuery) as exc:
        normalize_text(None)
    assert exc.value.code == "missing_query"


def test_normalize_text_blank() -> None:
    with pytest.raises(InvalidQuery):
        normalize_text("    ")


def test_normalize_text_length_bounds() -> None:
    assert normalize_text("a" * 500) == "a" * 500
    assert normalize_text(" " + "a" * 500 + " ") == "a" * 500
    with pytest.raises(InvalidQuery) as exc:
        normalize_text("a" * 501)
    assert exc.value.details == {"length": 501}


def test_filter_tokens_drops_unknown_and_lowercases() -> None:
    assert filter_tokens(["Title", "contenting", "CONTENT"], SEARCH_IN_FIELDS) == "title,content"
    assert filter_tokens(["xx", "yy"], COUNTRIES) is None
    assert filter_tokens([], LANGUAGES) is None
    assert filter_tokens(None, LANGUAGES) is None


def test_join_free_tokens_is_verbatim() -> None:
    assert join_free_tokens(["BBC-News", "cnn"]) == "BBC-News,cnn"
    assert join_free_tokens([]) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("popularity", "popularity"),
        ("PUBLISHEDAT", "publishedAt"),
        ("Relevancy", "relevancy"),
        ("date", "publishedAt"),
        ("", "publishedAt"),
    ],
)
def test_normalize_sort_by(value: str, expected: str) -> None:
    assert normalize_sort_by(value) == expected


def test_normalize_page_size() -> None:
    warnings: list[str] = []
    assert normalize_page_size(20, warnings=warnings) == 20
    assert normalize_page_size(0, warnings=warnings) == 100
    assert normalize_page_size(-100, warnings=warnings) == 100
    assert warnings == []
    assert normalize_page_size(200, warnings=warnings) == 100
    assert len(warnings) == 1


def test_normalize_page() -> None:
    warnings: list[str] = []
    assert normalize_page(3, warnings=warnings) == 3
    assert normalize_page(-3, warnings=warnings) == 1
    assert normalize_page(0, warnings=warnings) == 1
    assert len(warnings) == 2


def test_date_range_both_valid() -> None:
    assert normalize_date_range("2024-01-02T00:00:00Z", "2024-01-05T15:04:05Z") == (
        "2024-01-02T00:00:00Z",
        "2024-01-05T15:04:05Z",
    )


def test_date_range_equal_bounds_kept() -> None:
    assert normalize_date_range("2024-01-02T00:00:00Z", "2024-01-02T02:00:00+02:00") == (
        "2024-01-02T00:00:00Z",
        "2024-01-02T02:00:00+02:00",
    )


def test_date_range_reversed_drops_both() -> None:
    warnings: list[str] = []
    result = normalize_date_range(
        "2025-01-02T00:00:00Z", "2024-01-05T15:04:05Z", warnings=warnings
    )
    assert result == (None, None)
    assert len(warnings) == 1


def test_date_range_one_unparsable_drops_both() -> None:
    warnings: list[str] = []
    assert normalize_date_range("2024-01-02", "2024-01-05T15:04:05Z", warnings=warnings) == (
        None,
        None,
    )
    assert warnings


def test_date_range_single_bounds() -> None:
    assert normalize_date_range("2024-01-05T15:04:05Z", None) == ("2024-01-05T15:04:05Z", None)
    assert normalize_date_range(None, "2024-01-05T15:04:05Z") == (None, "2024-01-05T15:04:05Z")

    warnings: list[str] = []
    assert normalize_date_range(None, "2024-01-05T15:04:05", warnings=warnings) == (None, None)
    assert normalize_date_range("2024-01-05", None, warnings=warnings) == (None, None)
    assert len(warnings) == 2

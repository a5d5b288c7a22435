"""Per-parameter validation for NewsAPI query options.

Every function here is pure: values that fail validation are dropped or
replaced by a default, and a diagnostic is appended to the caller's
``warnings`` list. Only the search text itself can reject a request.
"""

from __future__ import annotations

from collections.abc import Iterable

from newsq.errors import InvalidQuery, MissingQuery
from newsq.timeutil import parse_rfc3339

MAX_QUERY_LENGTH = 500
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 100
DEFAULT_PAGE = 1
DEFAULT_SORT_BY = "publishedAt"

SORT_ORDERS: tuple[str, ...] = ("publishedAt", "popularity", "relevancy")
SEARCH_IN_FIELDS: tuple[str, ...] = ("title", "description", "content")
LANGUAGES: tuple[str, ...] = (
    "ar", "de", "en", "es", "fr", "he", "it", "nl", "no", "pt", "ru", "sv", "ud", "zh",
)
COUNTRIES: tuple[str, ...] = (
    "ae", "ar", "at", "au", "be", "bg", "br", "ca", "ch", "cn", "co", "cu", "cz", "de",
    "eg", "fr", "gb", "gr", "hk", "hu", "id", "ie", "il", "in", "it", "jp", "kr", "lt",
    "lv", "ma", "mx", "my", "ng", "nl", "no", "nz", "ph", "pl", "pt", "ro", "rs", "ru",
    "sa", "se", "sg", "si", "sk", "th", "tr", "tw", "ua", "us", "ve", "za",
)
CATEGORIES: tuple[str, ...] = (
    "business",
    "entertainment",
    "general",
    "health",
    "science",
    "sports",
    "technology",
)


def append_warning(warnings: list[str] | None, message: str) -> None:
    if warnings is None:
        return
    if message not in warnings:
        warnings.append(message)


def normalize_text(q: str | None) -> str:
    """Trim the search text and enforce the 1..500 character window."""
    if q is None:
        raise MissingQuery()
    text = q.strip()
    if len(text) > MAX_QUERY_LENGTH:
        raise InvalidQuery(
            f"query string length should be at most {MAX_QUERY_LENGTH} characters",
            length=len(text),
        )
    if len(text) < 1:
        raise InvalidQuery("query string length should be at least 1 character", length=0)
    return text


def filter_tokens(values: Iterable[str] | None, allowed: Iterable[str] = ()) -> str | None:
    """Comma-join the tokens found in ``allowed`` (compared lower-cased).

    With an empty ``allowed`` every token passes through verbatim.
    """
    if values is None:
        return None
    allowed_set = frozenset(allowed)
    kept: list[str] = []
    for value in values:
        if not allowed_set:
            kept.append(value)
            continue
        token = value.lower()
        if token in allowed_set:
            kept.append(token)
    if not kept:
        return None
    return ",".join(kept)


def join_free_tokens(values: Iterable[str] | None) -> str | None:
    return filter_tokens(values)


def normalize_sort_by(value: str) -> str:
    lowered = value.lower()
    for order in SORT_ORDERS:
        if order.lower() == lowered:
            return order
    return DEFAULT_SORT_BY


def normalize_page_size(value: int, *, warnings: list[str] | None = None) -> int:
    if value < 1:
        return DEFAULT_PAGE_SIZE
    if value > MAX_PAGE_SIZE:
        append_warning(
            warnings,
            f"pageSize {value} exceeds the maximum; using {MAX_PAGE_SIZE}",
        )
        return MAX_PAGE_SIZE
    return value


def normalize_page(value: int, *, warnings: list[str] | None = None) -> int:
    if value < 1:
        append_warning(warnings, f"page {value} is less than 1; using {DEFAULT_PAGE}")
        return DEFAULT_PAGE
    return value


def _valid_timestamp(name: str, value: str, warnings: list[str] | None) -> bool:
    try:
        parse_rfc3339(value)
    except ValueError as e:
        append_warning(warnings, f"ignoring {name}: {e}")
        return False
    return True


def normalize_date_range(
    from_: str | None, to: str | None, *, warnings: list[str] | None = None
) -> tuple[str | None, str | None]:
    """Return the (from, to) bounds that survive validation.

    When both bounds are given they are kept or dropped together: an
    unparsable bound or a ``to`` earlier than ``from`` drops both.
    """
    if from_ is not None and to is not None:
        try:
            start = parse_rfc3339(from_)
            end = parse_rfc3339(to)
        except ValueError as e:
            append_warning(warnings, f"ignoring from/to: {e}")
            return None, None
        if end < start:
            append_warning(
                warnings,
                f"ignoring from/to: to ({to}) is before from ({from_})",
            )
            return None, None
        return from_, to

    if from_ is not None:
        return (from_ if _valid_timestamp("from", from_, warnings) else None), None
    if to is not None:
        return None, (to if _valid_timestamp("to", to, warnings) else None)
    return None, None

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote, quote_plus

from newsq.errors import InvalidEndpoint
from newsq.news import normalize

API_ROOT = "https://newsapi.org/v2"


class Endpoint(Enum):
    EVERYTHING = ("everything", f"{API_ROOT}/everything?", "domains")
    TOP_HEADLINES = ("top-headlines", f"{API_ROOT}/top-headlines?", "region")
    SOURCES = ("sources", f"{API_ROOT}/top-headlines/sources?", "region")

    def __init__(self, id_: str, base_url: str, filters: str) -> None:
        self.id = id_
        self.base_url = base_url
        # "domains": free-text domain filters; "region": country/category filters
        self.filters = filters


def resolve_endpoint(name: str) -> Endpoint:
    wanted = name.strip().lower()
    for endpoint in Endpoint:
        if endpoint.id == wanted:
            return endpoint
    raise InvalidEndpoint(name)


def _tokens(name: str, value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        items = tuple(value)
        if all(isinstance(v, str) for v in items):
            return items
    raise TypeError(f"{name} must be a string or a list of strings, got {type(value).__name__}")


def _text(name: str, value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def _integer(name: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class NewsQuery:
    """Typed NewsAPI request options. ``None`` leaves an option out of the URL."""

    q: str | None = None
    search_in: tuple[str, ...] | None = None
    sources: tuple[str, ...] | None = None
    country: tuple[str, ...] | None = None
    category: tuple[str, ...] | None = None
    domains: tuple[str, ...] | None = None
    exclude_domains: tuple[str, ...] | None = None
    from_: str | None = None
    to: str | None = None
    language: tuple[str, ...] | None = None
    sort_by: str | None = None
    page_size: int | None = None
    page: int | None = None

    @staticmethod
    def from_params(params: Mapping[str, Any]) -> NewsQuery:
        """Build a query from NewsAPI option names (``searchIn``, ``pageSize``...).

        Unknown keys are ignored; values of the wrong type raise ``TypeError``.
        """
        return NewsQuery(
            q=_text("q", params.get("q")),
            search_in=_tokens("searchIn", params.get("searchIn")),
            sources=_tokens("sources", params.get("sources")),
            country=_tokens("country", params.get("country")),
            category=_tokens("category", params.get("category")),
            domains=_tokens("domains", params.get("domains")),
            exclude_domains=_tokens("excludeDomains", params.get("excludeDomains")),
            from_=_text("from", params.get("from")),
            to=_text("to", params.get("to")),
            language=_tokens("language", params.get("language")),
            sort_by=_text("sortBy", params.get("sortBy")),
            page_size=_integer("pageSize", params.get("pageSize")),
            page=_integer("page", params.get("page")),
        )


def _encode(value: str) -> str:
    return quote_plus(value)


def _encode_timestamp(value: str) -> str:
    # keep colons readable; "+" offsets must not turn into spaces
    return quote(value, safe=":")


def build_query_url(
    endpoint: Endpoint, query: NewsQuery, *, warnings: list[str] | None = None
) -> str:
    """Serialize ``query`` onto the endpoint's base URL in a fixed field order."""
    fragments: list[tuple[str, str]] = [("q", _encode(normalize.normalize_text(query.q)))]

    def add(name: str, value: str | None) -> None:
        if value:
            fragments.append((name, value))

    add("searchIn", normalize.filter_tokens(query.search_in, normalize.SEARCH_IN_FIELDS))

    if query.sources:
        sources = normalize.join_free_tokens(query.sources)
        add("sources", None if sources is None else _encode(sources))
    else:
        add("country", normalize.filter_tokens(query.country, normalize.COUNTRIES))
        add("category", normalize.filter_tokens(query.category, normalize.CATEGORIES))

    for name, values in (("domains", query.domains), ("excludeDomains", query.exclude_domains)):
        joined = normalize.join_free_tokens(values)
        add(name, None if joined is None else _encode(joined))

    from_, to = normalize.normalize_date_range(query.from_, query.to, warnings=warnings)
    add("from", None if from_ is None else _encode_timestamp(from_))
    add("to", None if to is None else _encode_timestamp(to))

    add("language", normalize.filter_tokens(query.language, normalize.LANGUAGES))

    if query.sort_by is not None:
        add("sortBy", normalize.normalize_sort_by(query.sort_by))
    if query.page_size is not None:
        add("pageSize", str(normalize.normalize_page_size(query.page_size, warnings=warnings)))
    if query.page is not None:
        add("page", str(normalize.normalize_page(query.page, warnings=warnings)))

    return endpoint.base_url + "&".join(f"{name}={value}" for name, value in fragments)

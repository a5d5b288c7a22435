from __future__ import annotations

import argparse

from newsq.errors import ExitCode, NewsqError
from newsq.news.query import Endpoint, NewsQuery
from newsq.timeutil import parse_duration, rfc3339_ago

FILTER_GROUPS: dict[str, tuple[str, ...]] = {
    "everything": ("search_in", "sources", "domains", "dates", "language", "sort_by", "paging"),
    "top-headlines": ("sources", "region", "language", "paging"),
    "sources": ("region", "language"),
}
ALL_GROUPS: tuple[str, ...] = (
    "search_in",
    "sources",
    "region",
    "domains",
    "dates",
    "language",
    "sort_by",
    "paging",
)


def groups_for(endpoint: Endpoint) -> tuple[str, ...]:
    return FILTER_GROUPS[endpoint.id]


def add_filter_args(p: argparse.ArgumentParser, *, groups: tuple[str, ...]) -> None:
    p.add_argument("query", type=str, help="Search text (1-500 characters)")
    if "search_in" in groups:
        p.add_argument(
            "--search-in",
            action="append",
            default=None,
            help="Field to search (repeatable): title, description, content",
        )
    if "sources" in groups:
        p.add_argument(
            "--source",
            action="append",
            default=None,
            help="Source id (repeatable); overrides --country/--category",
        )
    if "region" in groups:
        p.add_argument("--country", action="append", default=None, help="Country code (repeatable)")
        p.add_argument("--category", action="append", default=None, help="Category (repeatable)")
    if "domains" in groups:
        p.add_argument("--domain", action="append", default=None, help="Domain (repeatable)")
        p.add_argument(
            "--exclude-domain", action="append", default=None, help="Excluded domain (repeatable)"
        )
    if "dates" in groups:
        p.add_argument("--from", dest="from_", type=str, default=None, help="RFC 3339 lower bound")
        p.add_argument("--to", type=str, default=None, help="RFC 3339 upper bound")
        p.add_argument(
            "--since", type=str, default=None, help="Relative lower bound (e.g. 24h, 7d)"
        )
    if "language" in groups:
        p.add_argument("--language", action="append", default=None, help="Language (repeatable)")
    if "sort_by" in groups:
        p.add_argument(
            "--sort-by", type=str, default=None, help="publishedAt, popularity or relevancy"
        )
    if "paging" in groups:
        p.add_argument("--page-size", type=int, default=None, help="Results per page (max 100)")
        p.add_argument("--page", type=int, default=None, help="Page number (1-based)")


def _tuple(values: list[str] | None) -> tuple[str, ...] | None:
    return None if values is None else tuple(values)


def query_from_args(args: argparse.Namespace) -> NewsQuery:
    from_ = getattr(args, "from_", None)
    since = getattr(args, "since", None)
    if from_ is not None and since:
        raise NewsqError(
            code="invalid_usage",
            message="--from and --since cannot be combined",
            exit_code=ExitCode.INVALID_USAGE,
        )
    if since:
        try:
            from_ = rfc3339_ago(parse_duration(str(since)))
        except ValueError as e:
            raise NewsqError(
                code="invalid_since", message=str(e), exit_code=ExitCode.INVALID_USAGE
            ) from e

    return NewsQuery(
        q=str(args.query),
        search_in=_tuple(getattr(args, "search_in", None)),
        sources=_tuple(getattr(args, "source", None)),
        country=_tuple(getattr(args, "country", None)),
        category=_tuple(getattr(args, "category", None)),
        domains=_tuple(getattr(args, "domain", None)),
        exclude_domains=_tuple(getattr(args, "exclude_domain", None)),
        from_=from_,
        to=getattr(args, "to", None),
        language=_tuple(getattr(args, "language", None)),
        sort_by=getattr(args, "sort_by", None),
        page_size=getattr(args, "page_size", None),
        page=getattr(args, "page", None),
    )

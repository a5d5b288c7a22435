from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from newsq.errors import DecodeError, InvalidCredential, ProviderError, TransportError
from newsq.news.query import Endpoint, NewsQuery, build_query_url
from newsq.news.types import Article, ArticlesResult, Source, SourcesResult

API_KEY_ENV = "NEWSAPI_KEY"


@dataclass(frozen=True, slots=True)
class NewsApiSettings:
    api_key: str
    timeout: float | None = None
    proxy: str | None = None


def fetch_json(
    url: str, *, settings: NewsApiSettings, timeout: float | None = None
) -> tuple[int, dict[str, Any]]:
    """GET ``url`` with the API key header and return (HTTP status, JSON object)."""
    effective = settings.timeout if timeout is None else timeout
    client_args: dict[str, Any] = {"timeout": httpx.Timeout(effective)}
    if settings.proxy:
        client_args["proxy"] = settings.proxy
    headers = {
        "Accept": "application/json",
        "X-Api-Key": settings.api_key,
    }

    try:
        with httpx.Client(**client_args) as client:
            resp = client.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise TransportError(f"request to newsapi failed: {e}", url=url) from e

    try:
        payload = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(
            f"newsapi returned a non-JSON body (HTTP {resp.status_code})",
            status=resp.status_code,
        ) from e
    if not isinstance(payload, dict):
        raise DecodeError("newsapi response is not a JSON object", status=resp.status_code)
    return resp.status_code, payload


def _check_envelope(status_code: int, payload: dict[str, Any]) -> None:
    status = payload.get("status")
    if status == "error":
        raise ProviderError(
            str(payload.get("message") or "newsapi reported an error"),
            provider_code=None if payload.get("code") is None else str(payload["code"]),
            status=status_code,
        )
    if status != "ok":
        raise DecodeError(f"unexpected envelope status: {status!r}", status=status_code)


def _items(payload: dict[str, Any], key: str, status_code: int) -> list[dict[str, Any]]:
    items = payload.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise DecodeError(f"expected {key!r} to be a list", status=status_code)
    return [item for item in items if isinstance(item, dict)]


def get_news(
    url: str, *, settings: NewsApiSettings, timeout: float | None = None
) -> ArticlesResult:
    status_code, payload = fetch_json(url, settings=settings, timeout=timeout)
    _check_envelope(status_code, payload)

    total = payload.get("totalResults") or 0
    if isinstance(total, bool) or not isinstance(total, int):
        raise DecodeError("expected 'totalResults' to be an integer", status=status_code)
    articles = [Article.from_dict(item) for item in _items(payload, "articles", status_code)]
    return ArticlesResult(status="ok", total_results=total, articles=articles)


def get_sources(
    url: str, *, settings: NewsApiSettings, timeout: float | None = None
) -> SourcesResult:
    status_code, payload = fetch_json(url, settings=settings, timeout=timeout)
    _check_envelope(status_code, payload)

    sources = [Source.from_dict(item) for item in _items(payload, "sources", status_code)]
    return SourcesResult(status="ok", sources=sources)


def _as_query(query: NewsQuery | Mapping[str, Any]) -> NewsQuery:
    if isinstance(query, NewsQuery):
        return query
    return NewsQuery.from_params(query)


class NewsApiClient:
    """One method per NewsAPI endpoint: build the URL, then fetch and decode it."""

    def __init__(
        self, api_key: str, *, timeout: float | None = None, proxy: str | None = None
    ) -> None:
        key = (api_key or "").strip()
        if not key:
            raise InvalidCredential()
        self._settings = NewsApiSettings(api_key=key, timeout=timeout, proxy=proxy)

    @classmethod
    def from_env(cls, *, timeout: float | None = None, proxy: str | None = None) -> NewsApiClient:
        return cls(os.environ.get(API_KEY_ENV, ""), timeout=timeout, proxy=proxy)

    @property
    def settings(self) -> NewsApiSettings:
        return self._settings

    def everything(
        self,
        query: NewsQuery | Mapping[str, Any],
        *,
        warnings: list[str] | None = None,
        timeout: float | None = None,
    ) -> ArticlesResult:
        url = build_query_url(Endpoint.EVERYTHING, _as_query(query), warnings=warnings)
        return get_news(url, settings=self._settings, timeout=timeout)

    def top_headlines(
        self,
        query: NewsQuery | Mapping[str, Any],
        *,
        warnings: list[str] | None = None,
        timeout: float | None = None,
    ) -> ArticlesResult:
        url = build_query_url(Endpoint.TOP_HEADLINES, _as_query(query), warnings=warnings)
        return get_news(url, settings=self._settings, timeout=timeout)

    def sources(
        self,
        query: NewsQuery | Mapping[str, Any],
        *,
        warnings: list[str] | None = None,
        timeout: float | None = None,
    ) -> SourcesResult:
        url = build_query_url(Endpoint.SOURCES, _as_query(query), warnings=warnings)
        return get_sources(url, settings=self._settings, timeout=timeout)

    def get_news(self, url: str, *, timeout: float | None = None) -> ArticlesResult:
        return get_news(url, settings=self._settings, timeout=timeout)

    def get_sources(self, url: str, *, timeout: float | None = None) -> SourcesResult:
        return get_sources(url, settings=self._settings, timeout=timeout)

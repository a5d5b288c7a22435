from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True, slots=True)
class Article:
    source: Any = None
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = None
    published_at: str | None = None
    content: str | None = None

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> Article:
        return Article(
            source=raw.get("source"),
            author=_opt_str(raw.get("author")),
            title=_opt_str(raw.get("title")),
            description=_opt_str(raw.get("description")),
            url=_opt_str(raw.get("url")),
            url_to_image=_opt_str(raw.get("urlToImage")),
            published_at=_opt_str(raw.get("publishedAt")),
            content=_opt_str(raw.get("content")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "author": self.author,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "urlToImage": self.url_to_image,
            "publishedAt": self.published_at,
            "content": self.content,
        }


@dataclass(frozen=True, slots=True)
class Source:
    id: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    category: str | None = None
    language: str | None = None
    country: str | None = None

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> Source:
        return Source(
            id=_opt_str(raw.get("id")),
            name=_opt_str(raw.get("name")),
            description=_opt_str(raw.get("description")),
            url=_opt_str(raw.get("url")),
            category=_opt_str(raw.get("category")),
            language=_opt_str(raw.get("language")),
            country=_opt_str(raw.get("country")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "category": self.category,
            "language": self.language,
            "country": self.country,
        }


@dataclass(frozen=True, slots=True)
class ArticlesResult:
    status: str = "ok"
    total_results: int = 0
    articles: list[Article] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "totalResults": self.total_results,
            "articles": [a.to_dict() for a in self.articles],
        }


@dataclass(frozen=True, slots=True)
class SourcesResult:
    status: str = "ok"
    sources: list[Source] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "sources": [s.to_dict() for s in self.sources],
        }

"""Data types shared by the retrieval pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _rendered(post: dict, key: str) -> str:
    """Return ``post[key]["rendered"]``, or "" when it is missing or not a string."""
    value = post.get(key)
    if isinstance(value, dict):
        return _text(value.get("rendered"))
    return ""


@dataclass(frozen=True)
class Document:
    """A published post as returned by the WordPress REST API."""

    id: int | None
    title: str
    content: str
    excerpt: str
    link: str
    date: str

    @classmethod
    def from_post(cls, post: dict[str, Any]) -> Document:
        return cls(
            id=post.get("id"),
            title=_rendered(post, "title"),
            content=_rendered(post, "content"),
            excerpt=_rendered(post, "excerpt"),
            link=_text(post.get("link")),
            date=_text(post.get("date")),
        )


@dataclass(frozen=True)
class RankedDocument:
    """A candidate document with its similarity to the query."""

    document: Document
    score: float
    index: int


@dataclass(frozen=True)
class Source:
    """A citation attached to an answer."""

    title: str
    link: str
    similarity: float
    date: str


@dataclass(frozen=True)
class Response:
    """Answer text plus the sources it was built from."""

    answer: str
    sources: list[Source] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

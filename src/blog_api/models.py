"""Data models for the blog API builder.

Parsed documents come in from the markdown source as ``ParsedPost`` and
``ParsedAuthor`` records; the builder emits JSON:API ``ResourceCollection``
objects shaped ``{"data": [{"id", "type", "attributes"}]}``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .errors import MalformedInputError

COLLECTION_NAMES = ("posts", "tags", "authors")


class ResourceType(str, Enum):
    """JSON:API resource types produced by a build."""
    ARTICLE = "article"
    AUTHOR = "author"
    TAG = "tag"


# === Wire models ===

class Resource(BaseModel):
    """A single JSON:API resource object."""
    id: str
    type: ResourceType
    attributes: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class ResourceCollection(BaseModel):
    """Minimal JSON:API document: ``{"data": [...]}``."""
    data: list[Resource] = Field(default_factory=list)

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.data)

    def find(self, resource_id: str) -> Resource | None:
        """Return the resource with the given id, if any."""
        return next((r for r in self.data if r.id == resource_id), None)

    def to_json(self) -> str:
        """Serialize to the on-disk JSON document."""
        return json.dumps(self.model_dump(mode="json"), ensure_ascii=False, indent=2)


# === Parsed documents ===

def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _attributes(kind: str, record: Any) -> dict[str, Any]:
    if not isinstance(record, Mapping):
        raise MalformedInputError(kind, record, reason="not a mapping")
    attributes = record.get("attributes")
    if not isinstance(attributes, Mapping):
        raise MalformedInputError(kind, record)
    return dict(attributes)


@dataclass
class ParsedPost:
    """A blog post as produced by the markdown source."""
    slug: str
    attributes: dict[str, Any] = field(default_factory=dict)
    body: str = ""
    summary: str = ""

    @property
    def author(self) -> str:
        return _text(self.attributes.get("author"))

    @property
    def tags(self) -> str | list:
        return self.attributes.get("tags") or ""

    @property
    def published(self) -> bool:
        """Posts are published unless explicitly marked ``published: false``."""
        return self.attributes.get("published") is not False

    @classmethod
    def from_dict(cls, record: Any) -> ParsedPost:
        """Build from a raw mapping; raises MalformedInputError without attributes."""
        if isinstance(record, cls):
            return record
        attributes = _attributes("post", record)
        return cls(
            slug=_text(record.get("slug")),
            attributes=attributes,
            body=_text(record.get("body")),
            summary=_text(record.get("summary")),
        )


@dataclass
class ParsedAuthor:
    """An author profile as produced by the markdown source."""
    slug: str
    attributes: dict[str, Any] = field(default_factory=dict)
    body: str = ""
    summary: str = ""

    @property
    def name(self) -> str:
        return _text(self.attributes.get("name"))

    @classmethod
    def from_dict(cls, record: Any) -> ParsedAuthor:
        """Build from a raw mapping; raises MalformedInputError without attributes."""
        if isinstance(record, cls):
            return record
        attributes = _attributes("author", record)
        return cls(
            slug=_text(record.get("slug")),
            attributes=attributes,
            body=_text(record.get("body")),
            summary=_text(record.get("summary")),
        )


# === Build results ===

@dataclass(frozen=True)
class TagCount:
    """Number of included posts carrying a tag."""
    name: str
    post_count: int


@dataclass
class BuildResult:
    """Collections produced by one build, keyed by output name."""
    posts: ResourceCollection
    tags: ResourceCollection
    authors: ResourceCollection
    written: list[Path] = field(default_factory=list)

    @property
    def collections(self) -> dict[str, ResourceCollection]:
        return {"posts": self.posts, "tags": self.tags, "authors": self.authors}

"""Exceptions raised by the blog API builder."""

from __future__ import annotations


class BlogBuildError(Exception):
    """Base class for build failures."""


class MalformedInputError(BlogBuildError, ValueError):
    """A parsed post or author record lacks an ``attributes`` mapping."""

    def __init__(self, kind: str, record: object, reason: str = "missing attributes"):
        self.kind = kind
        self.record = record
        super().__init__(f"Malformed {kind} record ({reason}): {record!r}")


class SourceError(BlogBuildError):
    """A markdown document could not be read or its front matter is invalid."""

"""Markdown source — discovers blog documents and reads their front matter.

Expects a blog directory laid out as:
    <blog_dir>/posts/*.md
    <blog_dir>/authors/*.md

Each document may open with a YAML front matter block delimited by ``---``
lines. The file stem is the slug. Bodies are kept as raw markdown; the
summary is the text before a ``<!--more-->`` marker, or the first paragraph.
"""

from __future__ import annotations

import re
from functools import cached_property
from pathlib import Path

import yaml

from src.common.logging import setup_logging

from .errors import SourceError
from .models import ParsedAuthor, ParsedPost

logger = setup_logging(module_name="blog_api.source")

FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?", re.DOTALL | re.MULTILINE)
MORE_MARKER_RE = re.compile(r"<!--\s*more\s*-->", re.IGNORECASE)
PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def split_front_matter(text: str) -> tuple[dict, str]:
    """Return ``(attributes, body)`` for a markdown document."""
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text
    try:
        attributes = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as e:
        raise SourceError(f"Invalid front matter: {e}") from e
    if not isinstance(attributes, dict):
        raise SourceError(
            f"Front matter must be a mapping, got {type(attributes).__name__}"
        )
    return attributes, text[match.end():]


def extract_summary(body: str) -> str:
    """Text before ``<!--more-->``, else the first paragraph."""
    body = body.strip()
    if not body:
        return ""
    parts = MORE_MARKER_RE.split(body, maxsplit=1)
    if len(parts) == 2:
        return parts[0].strip()
    return PARAGRAPH_BREAK_RE.split(body, maxsplit=1)[0].strip()


def read_document(path: Path) -> dict:
    """Parse one markdown file into a raw ``{slug, attributes, body, summary}`` record."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"Could not read {path}: {e}") from e
    try:
        attributes, body = split_front_matter(text)
    except SourceError as e:
        raise SourceError(f"{path}: {e}") from e
    return {
        "slug": path.stem,
        "attributes": attributes,
        "body": MORE_MARKER_RE.sub("", body, count=1).strip(),
        "summary": extract_summary(body),
    }


class MarkdownSource:
    """Parsed posts and authors from a blog directory.

    Documents are read once, on first access, in sorted filename order.
    """

    def __init__(
        self,
        blog_directory: Path,
        posts_dir: str = "posts",
        authors_dir: str = "authors",
    ):
        self.blog_directory = Path(blog_directory)
        self.posts_directory = self.blog_directory / posts_dir
        self.authors_directory = self.blog_directory / authors_dir

    @cached_property
    def parsed_posts(self) -> list[ParsedPost]:
        return [ParsedPost.from_dict(r) for r in self._read_all(self.posts_directory)]

    @cached_property
    def parsed_authors(self) -> list[ParsedAuthor]:
        return [ParsedAuthor.from_dict(r) for r in self._read_all(self.authors_directory)]

    def _read_all(self, directory: Path) -> list[dict]:
        if not directory.is_dir():
            logger.warning("Directory not found, skipping: %s", directory)
            return []
        records = [read_document(p) for p in sorted(directory.glob("*.md"))]
        logger.info("Read %d documents from %s", len(records), directory)
        return records

"""Content aggregator — parsed documents to JSON:API collections.

Pure transformation, no I/O:
- Posts and authors become ``article`` / ``author`` resources whose
  attributes carry ``body``, ``summary`` and ``slug``
- Tags are tokenized from each post's comma-delimited ``tags`` field and
  counted once per post, in first-occurrence order
- Authors get a ``postCount`` from the posts they wrote

Usage:
    aggregator = ContentAggregator()
    collections = aggregator.aggregate(posts, authors)
    collections["tags"].to_json()
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

from src.common.logging import setup_logging

from .models import (
    ParsedAuthor,
    ParsedPost,
    Resource,
    ResourceCollection,
    ResourceType,
    TagCount,
)

logger = setup_logging(module_name="blog_api.serializer")

TAG_SEPARATOR = re.compile(r",\s*")


def split_tags(value: Any) -> list[str]:
    """Split a ``tags`` attribute into tokens.

    ``"ember, testing"`` -> ``["ember", "testing"]``. Missing or empty
    values give no tokens, as do empty tokens left by stray commas. A list
    (front matter like ``tags: [a, b]``) is taken as already split.
    """
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        tokens = [str(v) for v in value if v is not None]
    else:
        tokens = TAG_SEPARATOR.split(str(value))
    return [t for t in tokens if t]


class ContentAggregator:
    """Builds article, tag and author collections from parsed documents."""

    def to_resource_collection(
        self,
        resource_type: ResourceType | str,
        items: Iterable[ParsedPost | ParsedAuthor],
    ) -> ResourceCollection:
        """Serialize documents into a collection, preserving input order.

        ``body``, ``summary`` and ``slug`` are always present and take
        precedence over same-named keys in the document's attributes.
        """
        resource_type = ResourceType(resource_type)
        return ResourceCollection(
            data=[self._to_resource(resource_type, item) for item in items or []]
        )

    def count_tags(self, posts: Iterable[ParsedPost]) -> list[TagCount]:
        """Count posts per tag in first-occurrence order."""
        counts: Counter[str] = Counter()
        for post in posts:
            # one count per post, in token order
            tokens = dict.fromkeys(split_tags(post.tags), 1)
            if not tokens:
                logger.debug("Post %r has no tags", post.slug)
            counts.update(tokens)
        # Counter preserves insertion order of first occurrence
        return [TagCount(name=name, post_count=n) for name, n in counts.items()]

    def build_tag_collection(self, posts: Iterable[ParsedPost]) -> ResourceCollection:
        """Tag resources with ``name`` and ``postCount`` attributes."""
        return ResourceCollection(
            data=[
                Resource(
                    id=tag.name,
                    type=ResourceType.TAG,
                    attributes={"name": tag.name, "postCount": tag.post_count},
                )
                for tag in self.count_tags(posts)
            ]
        )

    def count_author_posts(self, posts: Iterable[ParsedPost]) -> Counter[str]:
        """Number of posts per author slug."""
        return Counter(post.author for post in posts if post.author)

    def build_author_collection(
        self,
        authors: Iterable[ParsedAuthor],
        posts: Sequence[ParsedPost] = (),
    ) -> ResourceCollection:
        """Author resources, each with a ``postCount`` over ``posts``."""
        post_counts = self.count_author_posts(posts)
        return ResourceCollection(
            data=[
                self._to_resource(
                    ResourceType.AUTHOR,
                    author,
                    postCount=post_counts.get(author.slug, 0),
                )
                for author in authors or []
            ]
        )

    def aggregate(
        self,
        posts: Sequence[ParsedPost],
        authors: Sequence[ParsedAuthor],
    ) -> dict[str, ResourceCollection]:
        """Build all three collections, keyed ``posts``, ``tags``, ``authors``."""
        return {
            "posts": self.to_resource_collection(ResourceType.ARTICLE, posts),
            "tags": self.build_tag_collection(posts),
            "authors": self.build_author_collection(authors, posts),
        }

    def _to_resource(
        self,
        resource_type: ResourceType,
        item: ParsedPost | ParsedAuthor,
        **derived: Any,
    ) -> Resource:
        for name in ("body", "summary"):
            if not getattr(item, name):
                logger.debug("%s %r has empty %s", resource_type.value, item.slug, name)
        attributes = dict(item.attributes)
        attributes.update(
            body=item.body or "",
            summary=item.summary or "",
            slug=item.slug,
        )
        attributes.update(derived)
        return Resource(id=item.slug, type=resource_type, attributes=attributes)

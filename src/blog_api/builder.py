"""Build orchestrator — parsed markdown to published JSON:API files.

Orchestrates the complete flow:
Collect (markdown source) → Filter (drafts) → Aggregate → Emit (writer)

Usage:
    builder = BuildOrchestrator(BuildConfig(environment="production"))
    result = builder.run(MarkdownSource(blog_dir))
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from src.common.config import BuildConfig
from src.common.logging import setup_logging

from .models import BuildResult, ParsedAuthor, ParsedPost, ResourceCollection
from .serializer import ContentAggregator
from .writer import JsonApiWriter

logger = setup_logging(module_name="blog_api.builder")


class ParsedContent(Protocol):
    """Anything exposing the parsed posts and authors of the current build."""
    parsed_posts: Iterable[Any]
    parsed_authors: Iterable[Any]


class CollectionWriter(Protocol):
    def write(self, collections: dict[str, ResourceCollection]) -> list: ...


class BuildOrchestrator:
    """Decides which posts go into a build and emits the three collections.

    Steps:
    1. Collect parsed posts and authors from the source
    2. Filter out drafts in production
    3. Aggregate articles, tags and authors (ContentAggregator)
    4. Emit to the writer as ``posts``, ``tags``, ``authors``

    Nothing is written unless every record is well formed.
    """

    def __init__(
        self,
        config: BuildConfig | None = None,
        aggregator: ContentAggregator | None = None,
    ):
        self.config = config or BuildConfig()
        self.aggregator = aggregator or ContentAggregator()

    def is_publishable(self, post: ParsedPost) -> bool:
        """Drafts are only excluded from production builds."""
        return not self.config.is_production or post.published

    def filter_posts(self, posts: Iterable[ParsedPost]) -> list[ParsedPost]:
        included = []
        for post in posts:
            if self.is_publishable(post):
                included.append(post)
            else:
                logger.debug("Skipping draft %r", post.slug)
        return included

    def collect(self, source: ParsedContent) -> tuple[list[ParsedPost], list[ParsedAuthor]]:
        """Coerce the source's records; raises MalformedInputError on bad input."""
        posts = [ParsedPost.from_dict(p) for p in source.parsed_posts or []]
        authors = [ParsedAuthor.from_dict(a) for a in source.parsed_authors or []]
        return posts, authors

    def build(self, source: ParsedContent) -> BuildResult:
        """Compute the collections without writing anything."""
        posts, authors = self.collect(source)
        included = self.filter_posts(posts)
        logger.info(
            "Building %s: %d/%d posts included, %d authors",
            self.config.environment,
            len(included),
            len(posts),
            len(authors),
        )
        collections = self.aggregator.aggregate(included, authors)
        return BuildResult(**collections)

    def run(
        self,
        source: ParsedContent,
        writer: CollectionWriter | None = None,
    ) -> BuildResult:
        """Execute the full build and hand the collections to the writer.

        Args:
            source: Markdown-parsing collaborator
            writer: Output writer. Defaults to a JsonApiWriter under
                    ``config.output_directory``.

        Returns:
            BuildResult with the collections and the paths written
        """
        result = self.build(source)

        writer = writer or JsonApiWriter(self.config.output_abs_directory)
        result.written = list(writer.write(result.collections))

        logger.info(
            "Build complete: %d articles, %d tags, %d authors",
            len(result.posts),
            len(result.tags),
            len(result.authors),
        )
        return result

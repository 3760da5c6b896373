# Blog API — parsed markdown to static JSON:API collections
"""
Blog API builder.

Turns parsed blog posts and author profiles into ``posts``, ``tags`` and
``authors`` JSON:API collections, dropping drafts from production builds.
"""

from .builder import BuildOrchestrator
from .errors import BlogBuildError, MalformedInputError, SourceError
from .models import (
    BuildResult,
    ParsedAuthor,
    ParsedPost,
    Resource,
    ResourceCollection,
    ResourceType,
    TagCount,
)
from .serializer import ContentAggregator, split_tags
from .source import MarkdownSource
from .writer import JsonApiWriter

__all__ = [
    "BlogBuildError",
    "BuildOrchestrator",
    "BuildResult",
    "ContentAggregator",
    "JsonApiWriter",
    "MalformedInputError",
    "MarkdownSource",
    "ParsedAuthor",
    "ParsedPost",
    "Resource",
    "ResourceCollection",
    "ResourceType",
    "SourceError",
    "TagCount",
    "split_tags",
]

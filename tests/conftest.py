"""Shared test fixtures for the blog API builder."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.blog_api.models import ParsedAuthor, ParsedPost


@pytest.fixture(autouse=True)
def clean_build_env(monkeypatch):
    """Keep BLOG_* variables from the shell out of BuildConfig defaults."""
    monkeypatch.delenv("BLOG_ENV", raising=False)
    monkeypatch.delenv("BLOG_OUTPUT_DIR", raising=False)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def draft_and_published() -> dict:
    """Raw parser output with one draft and one published post."""
    return {
        "parsed_posts": [
            {
                "slug": "draft-post",
                "attributes": {"author": "dave", "title": "Draft Post", "published": False},
            },
            {
                "slug": "published-post",
                "attributes": {"author": "dave", "title": "Published Post"},
            },
        ],
        "parsed_authors": [
            {"slug": "dave", "attributes": {"name": "Dave"}},
        ],
    }


@pytest.fixture
def tagged_posts() -> list[ParsedPost]:
    """Two included posts by dave with overlapping tags."""
    return [
        ParsedPost(
            slug="ember-testing",
            attributes={"author": "dave", "title": "Ember Testing", "tags": "ember, testing"},
            body="Body one",
            summary="Summary one",
        ),
        ParsedPost(
            slug="testing-on-a-bike",
            attributes={"author": "dave", "title": "Testing on a Bike", "tags": "testing,cycling"},
            body="Body two",
            summary="Summary two",
        ),
    ]


@pytest.fixture
def dave() -> ParsedAuthor:
    return ParsedAuthor(slug="dave", attributes={"name": "Dave"}, body="Dave rides bikes.")


class FakeMarkdownParser:
    """Stand-in for the markdown source collaborator."""

    def __init__(self, parsed_posts=None, parsed_authors=None):
        self.parsed_posts = parsed_posts or []
        self.parsed_authors = parsed_authors or []


@pytest.fixture
def fake_parser():
    return FakeMarkdownParser


@pytest.fixture
def blog_dir(tmp_path) -> Path:
    """A blog directory with two posts (one draft) and one author."""
    root = tmp_path / "blog"
    (root / "posts").mkdir(parents=True)
    (root / "authors").mkdir()
    (root / "posts" / "hello-world.md").write_text(
        "---\n"
        "title: Hello World\n"
        "author: dave\n"
        "tags: ember, testing\n"
        "---\n"
        "First paragraph.\n"
        "\n"
        "Second paragraph.\n",
        encoding="utf-8",
    )
    (root / "posts" / "work-in-progress.md").write_text(
        "---\n"
        "title: Work in Progress\n"
        "author: dave\n"
        "tags: testing, cycling\n"
        "published: false\n"
        "---\n"
        "Intro.\n"
        "<!--more-->\n"
        "Rest of the post.\n",
        encoding="utf-8",
    )
    (root / "authors" / "dave.md").write_text(
        "---\nname: Dave\n---\nDave writes about Ember.\n",
        encoding="utf-8",
    )
    return root

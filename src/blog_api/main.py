"""CLI entry point for the blog API build.

Usage:
    python -m src.blog_api.main --blog-dir blog --output dist
    python -m src.blog_api.main --environment production
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from src.common.config import BuildConfig, Settings, settings
from src.common.logging import setup_logging

from .builder import BuildOrchestrator
from .errors import BlogBuildError
from .source import MarkdownSource

logger = setup_logging(module_name="blog_api.main")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build JSON:API files from blog markdown")
    parser.add_argument(
        "--blog-dir",
        type=Path,
        help="Directory holding posts/ and authors/ (default: from settings)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory; files go to <output>/api/blog (default: from settings)",
    )
    parser.add_argument(
        "--environment",
        help="Build environment; drafts are dropped in 'production' (default: from settings)",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        help="Path to settings YAML (default: config/settings.yaml)",
    )

    args = parser.parse_args(argv)

    blog_settings = (Settings.load(args.settings) if args.settings else settings).blog
    config = BuildConfig.from_settings(blog_settings)
    if args.environment:
        config.environment = args.environment
    if args.output:
        config.output_directory = args.output.resolve()

    # CLI paths are relative to cwd, settings paths to the project root
    blog_dir = args.blog_dir.resolve() if args.blog_dir else blog_settings.blog_abs_directory
    source = MarkdownSource(blog_dir)

    try:
        result = BuildOrchestrator(config).run(source)
    except BlogBuildError as e:
        logger.error("Build failed: %s", e)
        return 1

    for path in result.written:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())

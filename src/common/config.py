"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_BLOG_DIR = PROJECT_ROOT / "blog"
DEFAULT_OUTPUT_DIR = PROJECT_ROOT / "dist"

PRODUCTION = "production"
DEVELOPMENT = "development"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


def _resolve(path: str | Path) -> Path:
    """Resolve a settings path relative to project root."""
    p = Path(path)
    if p.is_absolute():
        return p
    return PROJECT_ROOT / p


class BlogSettings(BaseModel):
    """Settings for the blog content build.

    Unset ``output_directory`` / ``environment`` fall through to
    ``BLOG_OUTPUT_DIR`` / ``BLOG_ENV`` in BuildConfig.
    """
    blog_directory: str = str(DEFAULT_BLOG_DIR)
    output_directory: str | None = None
    environment: str | None = None

    @property
    def blog_abs_directory(self) -> Path:
        return _resolve(self.blog_directory)


class Settings(BaseModel):
    """Top-level application settings."""
    blog: BlogSettings = Field(default_factory=BlogSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults."""
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


@dataclass
class BuildConfig:
    """Options for a single build invocation.

    Fields left unset are taken from ``BLOG_ENV`` / ``BLOG_OUTPUT_DIR``,
    then from the defaults. Explicit arguments always win.
    """

    environment: str | None = None
    output_directory: Path | None = None

    def __post_init__(self) -> None:
        """Load overrides from environment."""
        if self.environment is None:
            self.environment = os.getenv("BLOG_ENV") or DEVELOPMENT
        if self.output_directory is None:
            out = os.getenv("BLOG_OUTPUT_DIR")
            self.output_directory = Path(out) if out else DEFAULT_OUTPUT_DIR
        self.output_directory = Path(self.output_directory)

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    @property
    def output_abs_directory(self) -> Path:
        """Resolve output directory relative to project root."""
        return _resolve(self.output_directory)

    @classmethod
    def from_settings(cls, blog_settings: BlogSettings) -> BuildConfig:
        return cls(
            environment=blog_settings.environment,
            output_directory=blog_settings.output_directory,
        )


# Singleton settings instance
settings = Settings.load()

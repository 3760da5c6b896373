"""JSON:API writer — persists build collections as static JSON files.

Layout under the output directory:
    api/blog/posts.json
    api/blog/tags.json
    api/blog/authors.json
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from src.common.logging import setup_logging

from .models import COLLECTION_NAMES, ResourceCollection

logger = setup_logging(module_name="blog_api.writer")

DEFAULT_API_PATH = Path("api") / "blog"


class JsonApiWriter:
    """Writes one ``{"data": [...]}`` document per collection."""

    def __init__(self, output_directory: Path, api_path: Path = DEFAULT_API_PATH):
        self.output_directory = Path(output_directory)
        self.api_path = Path(api_path)

    @property
    def target_dir(self) -> Path:
        return self.output_directory / self.api_path

    def path_for(self, name: str) -> Path:
        return self.target_dir / f"{name}.json"

    def write(self, collections: dict[str, ResourceCollection]) -> list[Path]:
        """Write every collection; returns the written paths.

        All documents are serialized before any file is touched, and each
        file is replaced atomically.
        """
        missing = [name for name in COLLECTION_NAMES if name not in collections]
        if missing:
            raise ValueError(f"Missing collections: {', '.join(missing)}")

        payloads = {name: collections[name].to_json() for name in COLLECTION_NAMES}

        self.target_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for name, payload in payloads.items():
            path = self.path_for(name)
            _atomic_write(path, payload)
            logger.info("Wrote %s (%d resources)", path, len(collections[name]))
            written.append(path)
        return written


def _atomic_write(path: Path, content: str) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

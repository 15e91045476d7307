"""
Read-only access to the locally mirrored component sources.

Layout::

    components/
        alert-dialog/
            index.tsx
            usage.mdx      (optional override)
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import CatalogConfig
from .models import ComponentFile
from .naming import to_directory_name

logger = logging.getLogger(__name__)


def read_verbatim(path: Path, errors: str = "strict") -> str:
    """Decode a file as UTF-8 without newline translation."""
    return path.read_bytes().decode("utf-8", errors=errors)


class LocalMirror:
    """Resolves canonical names to files under the components directory."""

    def __init__(self, config: CatalogConfig):
        self.config = config
        self.root = config.components_dir

    def component_dir(self, canonical: str) -> Path:
        return self.root / to_directory_name(canonical)

    def has_component(self, canonical: str) -> bool:
        return self.component_dir(canonical).is_dir()

    def entry_file(self, canonical: str) -> Path | None:
        """Return the first existing entry file, or None."""
        directory = self.component_dir(canonical)
        for filename in self.config.entry_files:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        return None

    def entry_source(self, canonical: str) -> str | None:
        """Return the entry file text verbatim, or None when there is no entry file."""
        entry = self.entry_file(canonical)
        if entry is None:
            return None
        return read_verbatim(entry, errors="replace")

    def override_usage(self, canonical: str) -> str | None:
        """Return the local usage document verbatim, if there is one."""
        path = self.component_dir(canonical) / self.config.override_usage_file
        if not path.is_file():
            return None
        return read_verbatim(path)

    def read_files(self, canonical: str) -> list[ComponentFile]:
        """Read every file under the component directory.

        Paths are relative to the directory, prefixed with the canonical
        name and sorted so repeated calls return identical results.
        """
        directory = self.component_dir(canonical)
        files = []
        for path in sorted(p for p in directory.rglob("*") if p.is_file()):
            relative = path.relative_to(directory).as_posix()
            files.append(
                ComponentFile(
                    path=f"{canonical}/{relative}",
                    content=read_verbatim(path, errors="replace"),
                )
            )
        logger.debug("Read %d files for %s from %s", len(files), canonical, directory)
        return files

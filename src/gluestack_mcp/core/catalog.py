"""
Component catalog discovery.

The catalog is the upstream folder listing narrowed by two independent
checks:

1. ``not_excluded`` - the name is not in the static exclusion set
2. ``mirrored_locally`` - the local mirror has a directory for the name

It is recomputed on every call; nothing is cached.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable

from .config import CatalogConfig
from .github import GitHubSource
from .mirror import LocalMirror

logger = logging.getLogger(__name__)

NamePredicate = Callable[[str], bool]


def not_excluded(exclude: Iterable[str]) -> NamePredicate:
    """Predicate rejecting names in the exclusion set."""
    excluded = frozenset(exclude)

    def check(name: str) -> bool:
        return name not in excluded

    return check


def mirrored_locally(mirror: LocalMirror) -> NamePredicate:
    """Predicate rejecting names whose sources are not mirrored yet."""
    return mirror.has_component


def apply_filters(names: Iterable[str], predicates: Iterable[NamePredicate]) -> list[str]:
    """Keep names accepted by every predicate, preserving order."""
    checks = list(predicates)
    return [name for name in names if all(check(name) for check in checks)]


class ComponentCatalog:
    """Produces the authoritative, ordered list of canonical component names."""

    def __init__(self, config: CatalogConfig, source: GitHubSource, mirror: LocalMirror):
        self.source = source
        self.mirror = mirror
        self.predicates: list[NamePredicate] = [
            not_excluded(config.exclude),
            mirrored_locally(mirror),
        ]

    async def list_components(self) -> list[str]:
        """Return canonical names in upstream listing order.

        Raises:
            RemoteUnavailable: If the upstream listing cannot be fetched
        """
        folders = await self.source.list_folders()
        # The mirror check touches the filesystem
        components = await asyncio.to_thread(apply_filters, folders, self.predicates)
        skipped = len(folders) - len(components)
        if skipped:
            logger.debug("Catalog: %d listed, %d filtered out", len(folders), skipped)
        return components

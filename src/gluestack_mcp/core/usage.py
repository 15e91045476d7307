"""
Usage documentation lookup.

Resolution order:
1. Local ``usage.mdx`` override in the component directory, verbatim
2. Upstream ``index.nw.stories.mdx`` from raw.githubusercontent.com
3. A fixed placeholder

Lookup is best-effort and never raises.
"""

from __future__ import annotations

import asyncio
import logging

from .config import CatalogConfig
from .github import GitHubSource
from .mirror import LocalMirror

logger = logging.getLogger(__name__)


class UsageResolver:
    def __init__(self, config: CatalogConfig, source: GitHubSource, mirror: LocalMirror):
        self.placeholder = config.placeholder_usage
        self.source = source
        self.mirror = mirror

    def _local_override(self, canonical: str) -> str | None:
        try:
            return self.mirror.override_usage(canonical)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unreadable usage override for %s: %s", canonical, e)
            return None

    async def get_usage(self, canonical: str, catalog: list[str]) -> str:
        """Resolve usage text for a component of ``catalog``.

        Names outside the catalog resolve to the placeholder.
        """
        if canonical not in catalog:
            return self.placeholder

        override = await asyncio.to_thread(self._local_override, canonical)
        if override is not None:
            logger.debug("Using local usage override for %s", canonical)
            return override

        usage = await self.source.fetch_usage(canonical)
        return usage or self.placeholder

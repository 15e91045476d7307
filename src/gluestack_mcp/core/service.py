"""
Catalog service.

Composes discovery, symbol extraction, usage lookup and the local mirror
behind the three catalog operations. Every operation re-derives the
catalog from the upstream listing.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from .catalog import ComponentCatalog
from .config import CatalogConfig
from .errors import MissingLocalAssets, ParseFailure, UnknownComponent
from .github import GitHubSource
from .mirror import LocalMirror
from .models import ComponentCode, ComponentFile, ComponentList, ComponentUsage
from .symbols import child_symbols
from .usage import UsageResolver

logger = logging.getLogger(__name__)


class CatalogService:
    """The three catalog operations exposed over MCP."""

    def __init__(self, config: CatalogConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.source = GitHubSource(config, transport=transport)
        self.mirror = LocalMirror(config)
        self.catalog = ComponentCatalog(config, self.source, self.mirror)
        self.usage = UsageResolver(config, self.source, self.mirror)

    async def _require(self, name: str) -> list[str]:
        """Return the current catalog, raising if ``name`` is not in it."""
        components = await self.catalog.list_components()
        if name not in components:
            raise UnknownComponent(name)
        return components

    def _child_symbols(self, name: str) -> list[str]:
        entry = self.mirror.entry_file(name)
        if entry is None:
            raise ParseFailure(
                self.mirror.component_dir(name),
                f"no entry file (tried {', '.join(self.config.entry_files)})",
            )
        return child_symbols(name, entry)

    async def list_child_symbols(self, name: str) -> list[str]:
        """Child symbols for one catalog component."""
        await self._require(name)
        return await asyncio.to_thread(self._child_symbols, name)

    async def list_child_components(self, names: list[str]) -> dict[str, list[str]]:
        """Child symbols for each name, keyed in the order given."""
        results = await asyncio.gather(
            *(asyncio.to_thread(self._child_symbols, name) for name in names)
        )
        return dict(zip(names, results))

    async def list_components(self) -> ComponentList:
        components = await self.catalog.list_components()
        children = await self.list_child_components(components)
        logger.info("Listed %d components", len(components))
        return ComponentList(components=components, child_components=children)

    def _read_files(self, name: str) -> list[ComponentFile]:
        directory = self.mirror.component_dir(name)
        if not directory.is_dir():
            raise MissingLocalAssets(name, directory)
        return self.mirror.read_files(name)

    async def get_component_code(self, name: str) -> ComponentCode:
        await self._require(name)
        files = await asyncio.to_thread(self._read_files, name)
        return ComponentCode(files=files)

    async def get_component_usage(self, name: str) -> ComponentUsage:
        components = await self._require(name)
        usage = await self.usage.get_usage(name, components)

        code = await asyncio.to_thread(self.mirror.entry_source, name)
        return ComponentUsage(usage=usage, code=code)

"""
gluestack-mcp - an MCP server for the gluestack-ui v2 component catalog.

Answers three questions about the mirrored components: which exist, which
child components each composes, and what source files and usage
documentation each has.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    CatalogConfig,
    CatalogError,
    CatalogService,
    ConfigError,
    MissingLocalAssets,
    ParseFailure,
    RemoteUnavailable,
    UnknownComponent,
    load_config,
    to_directory_name,
)

__version__ = get_version()

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogService",
    "ConfigError",
    "MissingLocalAssets",
    "ParseFailure",
    "RemoteUnavailable",
    "UnknownComponent",
    "__version__",
    "load_config",
    "to_directory_name",
]

"""
MCP Server state management.

Holds the project root and the catalog service the tool handlers use.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.config import load_config
from ..core.service import CatalogService

logger = logging.getLogger("gluestack_mcp.server")

# ============================================================================
# Server State
# ============================================================================

_project_root: Path = Path.cwd()
_service: CatalogService | None = None


def set_project_root(path: Path) -> None:
    """Set the project root and drop the service built for the old one."""
    global _project_root, _service
    _project_root = path
    _service = None


def get_project_root() -> Path:
    """Get the current project root."""
    return _project_root


def set_service(service: CatalogService | None) -> None:
    """Replace the catalog service (None rebuilds it from config on next use)."""
    global _service
    _service = service


def get_service() -> CatalogService:
    """Get the catalog service, building it from the project config if needed."""
    global _service
    if _service is None:
        config = load_config(_project_root)
        logger.info("Components directory: %s", config.components_dir)
        _service = CatalogService(config)
    return _service

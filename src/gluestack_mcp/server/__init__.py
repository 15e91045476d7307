"""
gluestack-ui MCP Server implementation.

Implements the Model Context Protocol using the official MCP SDK, exposing
the gluestack-ui v2 component catalog: component names with their child
components, component source files, and usage documentation.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool

from .._version import get_version
from ..core.errors import CatalogError
from ..core.service import CatalogService
from .handlers import (
    get_component_code_handler,
    get_component_usage_handler,
    list_components_handler,
)
from .state import get_project_root, get_service, set_project_root
from .tools import GET_COMPONENT_CODE, GET_COMPONENT_USAGE, LIST_COMPONENTS, get_all_tools

# Configure logging to stderr only (stdout is reserved for JSON-RPC protocol)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("gluestack_mcp.server")

SERVER_NAME = "gluestack-ui-v2"
SERVER_TITLE = "Gluestack UI v2 MCP Server"

Handler = Callable[[CatalogService, dict[str, Any] | None], Awaitable[dict[str, Any]]]

TOOL_HANDLERS: dict[str, Handler] = {
    LIST_COMPONENTS: list_components_handler,
    GET_COMPONENT_CODE: get_component_code_handler,
    GET_COMPONENT_USAGE: get_component_usage_handler,
}

# Create the MCP server instance
server = Server(SERVER_NAME, version=get_version())


# ============================================================================
# Tool Handler
# ============================================================================


@server.list_tools()  # type: ignore[no-untyped-call]
async def list_tools_handler() -> list[Tool]:
    """List available catalog tools."""
    return get_all_tools()


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Execute a catalog tool.

    The SDK renders the returned dict as JSON text alongside the structured
    content. Raised errors become an error result for this call only.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name}")

    logger.debug("Calling %s with %s", name, arguments)
    try:
        return await handler(get_service(), arguments)
    except CatalogError as e:
        logger.warning("Tool %s failed: %s", name, e)
        raise
    except Exception:
        logger.exception("Tool %s failed unexpectedly", name)
        raise


# ============================================================================
# Server Entry Point
# ============================================================================


async def run_server(project_root: Path | None = None) -> None:
    """Run the catalog MCP server over stdio."""
    if project_root:
        set_project_root(project_root)
        logger.info(f"Project root set to: {project_root}")
    else:
        logger.info(f"Using default project root: {get_project_root()}")

    # Fail fast on a broken config before accepting requests
    get_service()

    logger.info(f"Starting {SERVER_TITLE}...")
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("stdio transport established, running server...")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except Exception as e:
        logger.exception(f"Server error: {e}")
        raise

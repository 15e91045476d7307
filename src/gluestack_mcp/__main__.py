"""
MCP server entry point.

Run with: python -m gluestack_mcp [project_root]
"""

import asyncio
import logging
import sys
from pathlib import Path

from gluestack_mcp.server import run_server

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the catalog MCP server."""
    project_root = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else Path.cwd()

    try:
        asyncio.run(run_server(project_root))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

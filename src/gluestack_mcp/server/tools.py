"""
MCP Server tool definitions.

This module contains the tool schema definitions for the MCP server.
"""

from __future__ import annotations

from mcp.types import Tool

from ..core.models import ComponentCode, ComponentList, ComponentUsage

LIST_COMPONENTS = "list_gluestack_components"
GET_COMPONENT_CODE = "get_gluestack_component_code"
GET_COMPONENT_USAGE = "get_gluestack_component_usage"

COMPONENT_NAME_SCHEMA = {
    "type": "object",
    "properties": {
        "componentName": {
            "type": "string",
            "description": "Canonical PascalCase component name, e.g. 'AlertDialog'",
        }
    },
    "required": ["componentName"],
}


def get_all_tools() -> list[Tool]:
    """Get all catalog tools."""
    return [
        Tool(
            name=LIST_COMPONENTS,
            description=(
                "List all available Gluestack UI v2 components and child components "
                "which should only be used as children of the main components."
            ),
            inputSchema={"type": "object", "properties": {}, "required": []},
            outputSchema=ComponentList.model_json_schema(),
        ),
        Tool(
            name=GET_COMPONENT_CODE,
            description="Get all source files for a Gluestack UI v2 component",
            inputSchema=COMPONENT_NAME_SCHEMA,
            outputSchema=ComponentCode.model_json_schema(),
        ),
        Tool(
            name=GET_COMPONENT_USAGE,
            description="Get markdown usage (with YAML frontmatter) for a component",
            inputSchema=COMPONENT_NAME_SCHEMA,
            outputSchema=ComponentUsage.model_json_schema(),
        ),
    ]

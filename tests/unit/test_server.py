"""Tests for the MCP tool surface."""

import json
from importlib.metadata import version

import pytest
from mcp import types

from gluestack_mcp.core.service import CatalogService
from gluestack_mcp.server import call_tool, list_tools_handler, server
from gluestack_mcp.server.state import set_service
from gluestack_mcp.server.tools import GET_COMPONENT_CODE, GET_COMPONENT_USAGE, LIST_COMPONENTS


@pytest.fixture(autouse=True)
def service(config, default_listing, make_transport):
    service = CatalogService(
        config, transport=make_transport(default_listing, usage={"Button": "# Button"})
    )
    set_service(service)
    yield service
    set_service(None)


async def _sdk_call(name: str, arguments: dict) -> types.CallToolResult:
    """Run a call through the SDK request handler, as a client would."""
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    result = await handler(request)
    return result.root


class TestListTools:
    @pytest.mark.asyncio
    async def test_three_tools(self) -> None:
        tools = await list_tools_handler()

        assert [t.name for t in tools] == [LIST_COMPONENTS, GET_COMPONENT_CODE, GET_COMPONENT_USAGE]

    @pytest.mark.asyncio
    async def test_schemas(self) -> None:
        tools = {t.name: t for t in await list_tools_handler()}

        assert tools[LIST_COMPONENTS].inputSchema["properties"] == {}
        assert tools[GET_COMPONENT_CODE].inputSchema["required"] == ["componentName"]
        assert set(tools[LIST_COMPONENTS].outputSchema["properties"]) == {
            "components",
            "child_components",
        }
        assert "files" in tools[GET_COMPONENT_CODE].outputSchema["properties"]
        assert tools[GET_COMPONENT_USAGE].outputSchema["required"] == ["usage"]


class TestCallTool:
    @pytest.mark.asyncio
    async def test_list_components(self) -> None:
        result = await call_tool(LIST_COMPONENTS, {})

        assert result["components"] == ["AlertDialog", "Button", "HStack"]
        assert result["child_components"]["Button"] == ["ButtonText", "ButtonGroup"]

    @pytest.mark.asyncio
    async def test_get_component_code(self) -> None:
        result = await call_tool(GET_COMPONENT_CODE, {"componentName": "HStack"})

        assert [f["path"] for f in result["files"]] == ["HStack/index.tsx"]

    @pytest.mark.asyncio
    async def test_get_component_usage(self) -> None:
        result = await call_tool(GET_COMPONENT_USAGE, {"componentName": "Button"})

        assert result["usage"] == "# Button"
        assert "export { Button" in result["code"]

    @pytest.mark.asyncio
    async def test_missing_argument(self) -> None:
        with pytest.raises(ValueError):
            await call_tool(GET_COMPONENT_CODE, {})

    @pytest.mark.asyncio
    async def test_unknown_tool(self) -> None:
        with pytest.raises(ValueError, match="Unknown tool"):
            await call_tool("delete_everything", {})


class TestProtocolResults:
    @pytest.mark.asyncio
    async def test_structured_and_text_content(self) -> None:
        result = await _sdk_call(GET_COMPONENT_CODE, {"componentName": "Button"})

        assert not result.isError
        assert result.structuredContent["files"][0]["path"] == "Button/index.tsx"
        assert json.loads(result.content[0].text) == result.structuredContent

    @pytest.mark.asyncio
    async def test_unknown_component_is_error_result(self) -> None:
        result = await _sdk_call(GET_COMPONENT_USAGE, {"componentName": "Tooltip"})

        assert result.isError
        assert "Component not found: Tooltip" in result.content[0].text


def test_installed_sdk_has_lowlevel_decorators() -> None:
    """The tool handlers are registered through the 1.x low-level decorators."""
    assert version("mcp").split(".")[0] == "1"
    assert callable(getattr(server, "call_tool", None))
    assert callable(getattr(server, "list_tools", None))

"""
Unit tests for the ToolRegistry.
"""

import json

import pytest
from pydantic import ValidationError
from cyber_mcp.core.tool_registry import ToolNotFoundError, ToolRegistry


@pytest.fixture
def registry(make_gateway, json_handler):
    gateway, transport = make_gateway(json_handler({"OutBlock_1": [{"id": "test26"}]}))
    return ToolRegistry(gateway=gateway), transport


class TestToolRegistry:

    def test_discovers_all_tools(self, registry):
        tool_registry, _ = registry
        assert sorted(tool_registry.tools) == ["getApiPath", "getClient", "getUserInfo"]

    def test_definitions(self, registry):
        tool_registry, _ = registry
        definitions = {d["function"]["name"]: d for d in tool_registry.get_definitions()}

        assert set(definitions) == {"getApiPath", "getClient", "getUserInfo"}
        assert all(d["type"] == "function" for d in definitions.values())
        assert definitions["getClient"]["function"]["parameters"].get("required") is None

    @pytest.mark.asyncio
    async def test_execute_validates_and_runs(self, registry):
        tool_registry, transport = registry
        result = await tool_registry.execute("getUserInfo", {"clientId": "test26"})

        assert json.loads(result.content[0].text) == {"users": [{"id": "test26"}]}
        assert transport.requests[0].url.params["clientId"] == "test26"

    @pytest.mark.asyncio
    async def test_execute_without_arguments(self, registry):
        tool_registry, _ = registry
        result = await tool_registry.execute("getApiPath")

        assert json.loads(result.content[0].text) == {"paths": [{"id": "test26"}]}

    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry):
        tool_registry, _ = registry
        with pytest.raises(ToolNotFoundError, match="Tool 'getNothing' not found."):
            await tool_registry.execute("getNothing", {})

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, registry):
        tool_registry, transport = registry
        with pytest.raises(ValidationError):
            await tool_registry.execute("getUserInfo", {})
        assert transport.requests == []

import os
import sys
from unittest.mock import patch

import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from mcp.server.fastmcp.exceptions import ToolError

import mcp_server as server


async def _tools_by_name():
    return {tool.name: tool for tool in await server.mcp.list_tools()}


async def test_lists_both_tools():
    tools = await _tools_by_name()
    assert set(tools) == {"get-alerts", "get-forecast"}
    assert tools["get-alerts"].description == "Get weather alerts for a state"
    assert tools["get-forecast"].description == "Get weather forecast for a location"


async def test_alerts_schema_requires_two_characters():
    schema = (await _tools_by_name())["get-alerts"].inputSchema

    state = schema["properties"]["state"]
    assert state["type"] == "string"
    assert state["minLength"] == 2
    assert state["maxLength"] == 2
    assert schema["required"] == ["state"]


async def test_forecast_schema_bounds():
    schema = (await _tools_by_name())["get-forecast"].inputSchema

    latitude = schema["properties"]["latitude"]
    longitude = schema["properties"]["longitude"]
    assert (latitude["minimum"], latitude["maximum"]) == (-90, 90)
    assert (longitude["minimum"], longitude["maximum"]) == (-180, 180)
    assert set(schema["required"]) == {"latitude", "longitude"}


async def test_invalid_state_is_rejected_before_handler():
    with patch("tools.make_nws_request") as mock_request:
        with pytest.raises(ToolError):
            await server.mcp.call_tool("get-alerts", {"state": "CAL"})
    mock_request.assert_not_called()


async def test_out_of_range_latitude_is_rejected():
    with pytest.raises(ToolError):
        await server.mcp.call_tool("get-forecast", {"latitude": 91, "longitude": 0})


def test_main_exits_nonzero_when_transport_fails():
    with patch.object(server.mcp, "run", side_effect=RuntimeError("stdio closed")):
        with pytest.raises(SystemExit) as exc_info:
            server.main()
    assert exc_info.value.code == 1

"""
Tests for Etherpad MCP connection tools.

Tests API key checking, connection info, the generic operation call and
the feature list.
"""
import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from etherpad_mcp import auth_tool
from etherpad_mcp.sdk.errors import EtherpadError
from etherpad_mcp.sdk.operations import OPERATIONS
from tests.conftest import get_tool_result_text, ok_response


@pytest.fixture
def app_with_auth():
    """Create FastMCP app with connection tools registered."""
    app = FastMCP("Test Etherpad Auth")
    app = auth_tool.register_tools(app)
    return app


@patch("etherpad_mcp.sdk.auth.check_token")
@pytest.mark.asyncio
async def test_check_token_valid(mock_sdk, app_with_auth, mock_client):
    mock_sdk.return_value = ok_response()

    result = await app_with_auth.call_tool("check_token", {})
    data = json.loads(get_tool_result_text(result))

    assert data["code"] == 0
    mock_sdk.assert_called_once_with(mock_client)


@patch("etherpad_mcp.sdk.auth.check_token")
@pytest.mark.asyncio
async def test_check_token_wrong_key(mock_sdk, app_with_auth):
    mock_sdk.side_effect = EtherpadError(4, "no or wrong API Key")

    result = await app_with_auth.call_tool("check_token", {})
    data = json.loads(get_tool_result_text(result))

    assert data["code"] == 4
    assert data["status"] == "4 no or wrong API Key"


@pytest.mark.asyncio
async def test_get_connection_info(app_with_auth):
    result = await app_with_auth.call_tool("get_connection_info", {})
    data = json.loads(get_tool_result_text(result))

    assert data == {
        "base_url": "http://localhost:9001/api",
        "api_version": "1.2.13",
        "timeout_seconds": 30.0,
        "raise_errors": True,
    }


@pytest.mark.asyncio
async def test_call_etherpad_api(app_with_auth, mock_client):
    mock_client.make_request.return_value = ok_response({"text": "hello\n"})

    result = await app_with_auth.call_tool(
        "call_etherpad_api", {"operation": "getText", "params": {"padID": "notes"}}
    )
    data = json.loads(get_tool_result_text(result))

    assert data["data"]["text"] == "hello\n"
    mock_client.make_request.assert_called_once_with("getText", {"padID": "notes"}, cancel=None)


@pytest.mark.asyncio
async def test_call_etherpad_api_applies_defaults(app_with_auth, mock_client):
    await app_with_auth.call_tool(
        "call_etherpad_api",
        {"operation": "copyPad", "params": {"sourceID": "a", "destinationID": "b"}},
    )

    mock_client.make_request.assert_called_once_with(
        "copyPad", {"sourceID": "a", "destinationID": "b", "force": False}, cancel=None
    )


@pytest.mark.asyncio
async def test_call_etherpad_api_unknown_operation(app_with_auth, mock_client):
    with pytest.raises(ToolError) as exc_info:
        await app_with_auth.call_tool("call_etherpad_api", {"operation": "dropDatabase"})

    assert "unknown etherpad operation" in str(exc_info.value).lower()
    mock_client.make_request.assert_not_called()


@pytest.mark.asyncio
async def test_call_etherpad_api_etherpad_error(app_with_auth, mock_client):
    mock_client.make_request.side_effect = EtherpadError(1, "padID does not exist")

    result = await app_with_auth.call_tool(
        "call_etherpad_api", {"operation": "deletePad", "params": {"padID": "nope"}}
    )
    data = json.loads(get_tool_result_text(result))

    assert data["error"] == "padID does not exist"


@pytest.mark.asyncio
async def test_get_available_features(app_with_auth):
    result = await app_with_auth.call_tool("get_available_features", {})
    data = json.loads(get_tool_result_text(result))

    assert data["platform"] == "Etherpad-Lite"
    assert data["api_version"] == "1.2.13"
    assert "notes" in data

    listed = [op["operation"] for ops in data["operations"].values() for op in ops]
    assert sorted(listed) == sorted(OPERATIONS)
    assert {"groups", "authors", "sessions", "content", "chat", "pads", "auth"} == set(data["operations"])


@pytest.mark.asyncio
async def test_tool_without_configuration(app_with_auth, mock_get_client):
    mock_get_client.side_effect = ValueError(
        "No Etherpad API key. Set ETHERPAD_API_KEY or ETHERPAD_API_KEY_FILE."
    )

    with pytest.raises(ToolError) as exc_info:
        await app_with_auth.call_tool("check_token", {})

    assert "api key" in str(exc_info.value).lower()


def test_auth_tools_registered(app_with_auth):
    tool_names = list(app_with_auth._tool_manager._tools.keys())

    for tool_name in [
        "check_token",
        "get_connection_info",
        "call_etherpad_api",
        "get_available_features",
    ]:
        assert tool_name in tool_names, f"Tool {tool_name} not registered"

"""
Tests for Etherpad MCP pad content tools.
"""
import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP

from etherpad_mcp import content
from etherpad_mcp.sdk.errors import EtherpadError
from tests.conftest import get_tool_result_text, ok_response


@pytest.fixture
def app_with_content():
    """Create FastMCP app with content tools registered."""
    app = FastMCP("Test Etherpad Content")
    app = content.register_tools(app)
    return app


@patch("etherpad_mcp.sdk.content.get_text")
@pytest.mark.asyncio
async def test_get_text(mock_sdk, app_with_content, mock_client):
    mock_sdk.return_value = ok_response({"text": "Welcome to Etherpad!\n"})

    result = await app_with_content.call_tool("get_text", {"pad_id": "notes"})
    data = json.loads(get_tool_result_text(result))

    assert data["data"]["text"] == "Welcome to Etherpad!\n"
    mock_sdk.assert_called_once_with(mock_client, "notes", rev=None)


@patch("etherpad_mcp.sdk.content.get_text")
@pytest.mark.asyncio
async def test_get_text_at_revision(mock_sdk, app_with_content, mock_client):
    mock_sdk.return_value = ok_response({"text": ""})

    await app_with_content.call_tool("get_text", {"pad_id": "notes", "rev": 0})

    mock_sdk.assert_called_once_with(mock_client, "notes", rev=0)


@patch("etherpad_mcp.sdk.content.set_text")
@pytest.mark.asyncio
async def test_set_text(mock_sdk, app_with_content, mock_client):
    mock_sdk.return_value = ok_response()

    result = await app_with_content.call_tool("set_text", {"pad_id": "notes", "text": "new"})
    data = json.loads(get_tool_result_text(result))

    assert data["code"] == 0
    assert data["data"] == {}
    mock_sdk.assert_called_once_with(mock_client, "notes", "new")


@patch("etherpad_mcp.sdk.content.set_html")
@pytest.mark.asyncio
async def test_set_html_rejected(mock_sdk, app_with_content):
    mock_sdk.side_effect = EtherpadError(1, "HTML is malformed")

    result = await app_with_content.call_tool("set_html", {"pad_id": "notes", "html": "<p"})
    data = json.loads(get_tool_result_text(result))

    assert data["error"] == "HTML is malformed"
    assert data["code"] == 1


@patch("etherpad_mcp.sdk.content.create_diff_html")
@pytest.mark.asyncio
async def test_create_diff_html(mock_sdk, app_with_content, mock_client):
    mock_sdk.return_value = ok_response({"html": "<ins>x</ins>", "authors": ["a.1"]})

    result = await app_with_content.call_tool(
        "create_diff_html", {"pad_id": "notes", "start_rev": 1, "end_rev": 3}
    )
    data = json.loads(get_tool_result_text(result))

    assert data["data"]["authors"] == ["a.1"]
    mock_sdk.assert_called_once_with(mock_client, "notes", 1, 3)


@patch("etherpad_mcp.sdk.content.restore_revision")
@pytest.mark.asyncio
async def test_restore_revision(mock_sdk, app_with_content, mock_client):
    mock_sdk.return_value = ok_response()

    await app_with_content.call_tool("restore_revision", {"pad_id": "notes", "rev": 2})

    mock_sdk.assert_called_once_with(mock_client, "notes", 2)


def test_content_tools_registered(app_with_content):
    tool_names = list(app_with_content._tool_manager._tools.keys())

    for tool_name in [
        "get_text",
        "set_text",
        "append_text",
        "get_html",
        "set_html",
        "get_attribute_pool",
        "get_revision_changeset",
        "create_diff_html",
        "restore_revision",
    ]:
        assert tool_name in tool_names, f"Tool {tool_name} not registered"

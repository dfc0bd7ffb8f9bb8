"""
Tests for Etherpad MCP session and chat tools.
"""
import json
import pytest
from unittest.mock import patch
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from etherpad_mcp import chat, sessions
from tests.conftest import get_tool_result_text, ok_response


@pytest.fixture
def app_with_sessions():
    """Create FastMCP app with session and chat tools registered."""
    app = FastMCP("Test Etherpad Sessions")
    app = sessions.register_tools(app)
    app = chat.register_tools(app)
    return app


@patch("etherpad_mcp.sdk.sessions.create_session")
@pytest.mark.asyncio
async def test_create_session_iso_date(mock_sdk, app_with_sessions, mock_client):
    mock_sdk.return_value = ok_response({"sessionID": "s.1"})

    result = await app_with_sessions.call_tool(
        "create_session",
        {"group_id": "g.1", "author_id": "a.1", "valid_until": "2026-01-01"},
    )
    data = json.loads(get_tool_result_text(result))

    assert data["data"]["sessionID"] == "s.1"
    mock_sdk.assert_called_once_with(mock_client, "g.1", "a.1", 1767225600)


@patch("etherpad_mcp.sdk.sessions.create_session")
@pytest.mark.asyncio
async def test_create_session_unix_seconds(mock_sdk, app_with_sessions, mock_client):
    mock_sdk.return_value = ok_response({"sessionID": "s.1"})

    await app_with_sessions.call_tool(
        "create_session",
        {"group_id": "g.1", "author_id": "a.1", "valid_until": "1767225600"},
    )

    mock_sdk.assert_called_once_with(mock_client, "g.1", "a.1", 1767225600)


@patch("etherpad_mcp.sdk.sessions.create_session")
@pytest.mark.asyncio
async def test_create_session_bad_date(mock_sdk, app_with_sessions):
    with pytest.raises(ToolError) as exc_info:
        await app_with_sessions.call_tool(
            "create_session",
            {"group_id": "g.1", "author_id": "a.1", "valid_until": "next week"},
        )

    assert "invalid timestamp" in str(exc_info.value).lower()
    mock_sdk.assert_not_called()


@patch("etherpad_mcp.sdk.sessions.get_session_info")
@pytest.mark.asyncio
async def test_get_session_info_adds_iso(mock_sdk, app_with_sessions):
    mock_sdk.return_value = ok_response(
        {"groupID": "g.1", "authorID": "a.1", "validUntil": 1767225600}
    )

    result = await app_with_sessions.call_tool("get_session_info", {"session_id": "s.1"})
    data = json.loads(get_tool_result_text(result))

    assert data["data"]["valid_until_iso"] == "2026-01-01T00:00:00+00:00"


@patch("etherpad_mcp.sdk.chat.get_chat_history")
@pytest.mark.asyncio
async def test_get_chat_history(mock_sdk, app_with_sessions, mock_client):
    mock_sdk.return_value = ok_response({"messages": [{"text": "hi", "userId": "a.1"}]})

    result = await app_with_sessions.call_tool(
        "get_chat_history", {"pad_id": "notes", "start": 0, "end": 9}
    )
    data = json.loads(get_tool_result_text(result))

    assert data["data"]["messages"][0]["text"] == "hi"
    mock_sdk.assert_called_once_with(mock_client, "notes", start=0, end=9)


@pytest.mark.asyncio
async def test_get_chat_history_half_range(app_with_sessions):
    with pytest.raises(ToolError) as exc_info:
        await app_with_sessions.call_tool("get_chat_history", {"pad_id": "notes", "start": 0})

    assert "start and end" in str(exc_info.value)


@patch("etherpad_mcp.sdk.chat.append_chat_message")
@pytest.mark.asyncio
async def test_append_chat_message_with_time(mock_sdk, app_with_sessions, mock_client):
    mock_sdk.return_value = ok_response()

    await app_with_sessions.call_tool(
        "append_chat_message",
        {"pad_id": "notes", "text": "hi", "author_id": "a.1", "time": "2026-01-01T01:00:00+01:00"},
    )

    mock_sdk.assert_called_once_with(mock_client, "notes", "hi", "a.1", time=1767225600000)


@patch("etherpad_mcp.sdk.chat.append_chat_message")
@pytest.mark.asyncio
async def test_append_chat_message_unix_millis(mock_sdk, app_with_sessions, mock_client):
    mock_sdk.return_value = ok_response()

    await app_with_sessions.call_tool(
        "append_chat_message",
        {"pad_id": "notes", "text": "hi", "author_id": "a.1", "time": "1767225600123"},
    )

    mock_sdk.assert_called_once_with(mock_client, "notes", "hi", "a.1", time=1767225600123)


@patch("etherpad_mcp.sdk.chat.append_chat_message")
@pytest.mark.asyncio
async def test_append_chat_message_server_time(mock_sdk, app_with_sessions, mock_client):
    mock_sdk.return_value = ok_response()

    await app_with_sessions.call_tool(
        "append_chat_message", {"pad_id": "notes", "text": "hi", "author_id": "a.1"}
    )

    mock_sdk.assert_called_once_with(mock_client, "notes", "hi", "a.1", time=None)


def test_session_and_chat_tools_registered(app_with_sessions):
    tool_names = list(app_with_sessions._tool_manager._tools.keys())

    for tool_name in [
        "create_session",
        "delete_session",
        "get_session_info",
        "list_sessions_of_group",
        "list_sessions_of_author",
        "get_chat_history",
        "get_chat_head",
        "append_chat_message",
    ]:
        assert tool_name in tool_names, f"Tool {tool_name} not registered"

"""
Shared pytest fixtures for Etherpad MCP testing.
"""
import json
import pytest
from unittest.mock import Mock, patch

from etherpad_mcp.sdk.client import Response


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def json_response(body, status_code=200):
    """A requests.Response stand-in whose json() returns body."""
    response = Mock()
    response.status_code = status_code
    response.json = Mock(return_value=body)
    response.text = json.dumps(body)
    return response


def ok_response(data=None, message="ok"):
    return Response(code=0, message=message, data=data or {})


@pytest.fixture
def mock_client():
    """Create a mock EtherpadClient with configuration attributes set."""
    client = Mock()
    client.base_url = "http://localhost:9001/api"
    client.api_version = "1.2.13"
    client.timeout = 30.0
    client.raise_etherpad_errors = True
    client.make_request = Mock(return_value=ok_response())
    return client


@pytest.fixture(autouse=True)
def mock_get_client(mock_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Yields the mock function (not the client) so tests can set side_effect
    for error scenarios like a missing API key.
    """
    get_client_fn = Mock(return_value=mock_client)

    modules_to_patch = [
        "etherpad_mcp.auth_tool",
        "etherpad_mcp.authors",
        "etherpad_mcp.chat",
        "etherpad_mcp.content",
        "etherpad_mcp.groups",
        "etherpad_mcp.pads",
        "etherpad_mcp.sessions",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_client", get_client_fn)
        p.start()
        patchers.append(p)

    yield get_client_fn

    for p in patchers:
        p.stop()

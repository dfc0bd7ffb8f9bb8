"""
Session tools for Etherpad MCP server.

Sessions give an author access to the pads of a group until they expire.
"""

from etherpad_mcp.client_factory import (
    call_and_format,
    format_response,
    get_client,
    handle_etherpad_error,
)
from etherpad_mcp.sdk import sessions as sdk_sessions
from etherpad_mcp.sdk.errors import EtherpadError
from etherpad_mcp.utils import format_timestamp, to_unix_timestamp


def register_tools(app):
    """Register session tools with the MCP app."""

    @app.tool()
    async def create_session(group_id: str, author_id: str, valid_until: str) -> str:
        """
        Create a session giving an author access to a group's pads.

        Args:
            group_id: The group ("g.xxx")
            author_id: The author ("a.xxx")
            valid_until: Expiry as unix seconds or ISO 8601 date/time
                (e.g. "2026-12-31T18:00:00", UTC when no offset is given)

        Returns:
            JSON whose data holds the new sessionID
        """
        timestamp = to_unix_timestamp(valid_until)
        return call_and_format(
            sdk_sessions.create_session, get_client(), group_id, author_id, timestamp
        )

    @app.tool()
    async def delete_session(session_id: str) -> str:
        """Delete a session."""
        return call_and_format(sdk_sessions.delete_session, get_client(), session_id)

    @app.tool()
    async def get_session_info(session_id: str) -> str:
        """
        Get the group, author and expiry of a session.

        Returns:
            JSON whose data holds groupID, authorID, validUntil and
            valid_until_iso (UTC)
        """
        client = get_client()
        try:
            response = sdk_sessions.get_session_info(client, session_id)
        except EtherpadError as e:
            return handle_etherpad_error(e)

        if response.ok:
            response.data["valid_until_iso"] = format_timestamp(response.data.get("validUntil"))
        return format_response(response)

    @app.tool()
    async def list_sessions_of_group(group_id: str) -> str:
        """List the sessions of a group."""
        return call_and_format(sdk_sessions.list_sessions_of_group, get_client(), group_id)

    @app.tool()
    async def list_sessions_of_author(author_id: str) -> str:
        """List the sessions of an author."""
        return call_and_format(sdk_sessions.list_sessions_of_author, get_client(), author_id)

    return app

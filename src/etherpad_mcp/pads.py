"""
Pad tools for Etherpad MCP server.

Provides tools for creating, copying, moving and inspecting pads.
"""

from etherpad_mcp.client_factory import (
    call_and_format,
    format_response,
    get_client,
    handle_etherpad_error,
)
from etherpad_mcp.sdk import pads as sdk_pads
from etherpad_mcp.sdk.errors import EtherpadError
from etherpad_mcp.utils import format_timestamp_ms


def register_tools(app):
    """Register pad tools with the MCP app."""

    @app.tool()
    async def create_pad(pad_id: str, text: str = None) -> str:
        """
        Create a new pad.

        Args:
            pad_id: Id of the new pad (must not exist yet)
            text: Initial content (optional, server welcome text otherwise)

        Returns:
            JSON with code, status, message and data
        """
        return call_and_format(sdk_pads.create_pad, get_client(), pad_id, text=text)

    @app.tool()
    async def delete_pad(pad_id: str) -> str:
        """
        Delete a pad permanently.

        Args:
            pad_id: The pad to delete
        """
        return call_and_format(sdk_pads.delete_pad, get_client(), pad_id)

    @app.tool()
    async def list_all_pads() -> str:
        """
        List every pad on the Etherpad instance.

        Returns:
            JSON whose data holds padIDs
        """
        return call_and_format(sdk_pads.list_all_pads, get_client())

    @app.tool()
    async def copy_pad(source_id: str, destination_id: str, force: bool = False) -> str:
        """
        Copy a pad including its history.

        Args:
            source_id: Pad to copy
            destination_id: Id of the copy
            force: Overwrite the destination if it exists (default: false)
        """
        return call_and_format(
            sdk_pads.copy_pad, get_client(), source_id, destination_id, force=force
        )

    @app.tool()
    async def move_pad(source_id: str, destination_id: str, force: bool = False) -> str:
        """
        Move (rename) a pad.

        Args:
            source_id: Pad to move
            destination_id: New pad id
            force: Overwrite the destination if it exists (default: false)
        """
        return call_and_format(
            sdk_pads.move_pad, get_client(), source_id, destination_id, force=force
        )

    @app.tool()
    async def get_revisions_count(pad_id: str) -> str:
        """Get the number of revisions of a pad."""
        return call_and_format(sdk_pads.get_revisions_count, get_client(), pad_id)

    @app.tool()
    async def get_saved_revisions_count(pad_id: str) -> str:
        """Get the number of saved revisions of a pad."""
        return call_and_format(sdk_pads.get_saved_revisions_count, get_client(), pad_id)

    @app.tool()
    async def list_saved_revisions(pad_id: str) -> str:
        """List the saved revision numbers of a pad."""
        return call_and_format(sdk_pads.list_saved_revisions, get_client(), pad_id)

    @app.tool()
    async def save_revision(pad_id: str, rev: int = None) -> str:
        """
        Mark a revision as saved.

        Args:
            pad_id: The pad
            rev: Revision number (optional, latest otherwise)
        """
        return call_and_format(sdk_pads.save_revision, get_client(), pad_id, rev=rev)

    @app.tool()
    async def pad_users_count(pad_id: str) -> str:
        """Get the number of users currently editing a pad."""
        return call_and_format(sdk_pads.pad_users_count, get_client(), pad_id)

    @app.tool()
    async def pad_users(pad_id: str) -> str:
        """List the users currently editing a pad."""
        return call_and_format(sdk_pads.pad_users, get_client(), pad_id)

    @app.tool()
    async def list_authors_of_pad(pad_id: str) -> str:
        """List the ids of all authors who contributed to a pad."""
        return call_and_format(sdk_pads.list_authors_of_pad, get_client(), pad_id)

    @app.tool()
    async def get_last_edited(pad_id: str) -> str:
        """
        Get when a pad was last edited.

        Returns:
            JSON whose data holds lastEdited (milliseconds) and
            last_edited_iso (UTC)
        """
        client = get_client()
        try:
            response = sdk_pads.get_last_edited(client, pad_id)
        except EtherpadError as e:
            return handle_etherpad_error(e)

        if response.ok:
            response.data["last_edited_iso"] = format_timestamp_ms(response.data.get("lastEdited"))
        return format_response(response)

    @app.tool()
    async def get_read_only_id(pad_id: str) -> str:
        """Get the read-only id of a pad (for sharing view-only links)."""
        return call_and_format(sdk_pads.get_read_only_id, get_client(), pad_id)

    @app.tool()
    async def get_pad_id(read_only_id: str) -> str:
        """Resolve a read-only id back to its pad id."""
        return call_and_format(sdk_pads.get_pad_id, get_client(), read_only_id)

    @app.tool()
    async def set_public_status(pad_id: str, public_status: bool) -> str:
        """
        Make a group pad public or private.

        Args:
            pad_id: Group pad id ("g.xxx$name")
            public_status: True for public access
        """
        return call_and_format(sdk_pads.set_public_status, get_client(), pad_id, public_status)

    @app.tool()
    async def get_public_status(pad_id: str) -> str:
        """Get whether a group pad is public."""
        return call_and_format(sdk_pads.get_public_status, get_client(), pad_id)

    @app.tool()
    async def set_password(pad_id: str, password: str) -> str:
        """
        Protect a group pad with a password.

        Args:
            pad_id: Group pad id
            password: The new password
        """
        return call_and_format(sdk_pads.set_password, get_client(), pad_id, password)

    @app.tool()
    async def is_password_protected(pad_id: str) -> str:
        """Get whether a pad is password protected."""
        return call_and_format(sdk_pads.is_password_protected, get_client(), pad_id)

    @app.tool()
    async def send_clients_message(pad_id: str, msg: str) -> str:
        """
        Send a custom message to every client connected to a pad.

        Args:
            pad_id: The pad
            msg: Message payload (plain text or JSON text)
        """
        return call_and_format(sdk_pads.send_clients_message, get_client(), pad_id, msg)

    return app

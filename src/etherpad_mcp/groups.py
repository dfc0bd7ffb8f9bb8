"""
Group tools for Etherpad MCP server.
"""

from etherpad_mcp.client_factory import call_and_format, get_client
from etherpad_mcp.sdk import groups as sdk_groups


def register_tools(app):
    """Register group tools with the MCP app."""

    @app.tool()
    async def create_group() -> str:
        """
        Create a new group.

        Returns:
            JSON whose data holds the new groupID
        """
        return call_and_format(sdk_groups.create_group, get_client())

    @app.tool()
    async def create_group_if_not_exists_for(group_mapper: str) -> str:
        """
        Get the group mapped to an external id, creating it if needed.

        Args:
            group_mapper: Identifier of the group in your own system
        """
        return call_and_format(sdk_groups.create_group_if_not_exists_for, get_client(), group_mapper)

    @app.tool()
    async def delete_group(group_id: str) -> str:
        """Delete a group together with all of its pads."""
        return call_and_format(sdk_groups.delete_group, get_client(), group_id)

    @app.tool()
    async def list_pads(group_id: str) -> str:
        """List the pads of a group."""
        return call_and_format(sdk_groups.list_pads, get_client(), group_id)

    @app.tool()
    async def create_group_pad(group_id: str, pad_name: str, text: str = None) -> str:
        """
        Create a pad inside a group.

        Args:
            group_id: The owning group ("g.xxx")
            pad_name: Pad name within the group
            text: Initial content (optional)

        Returns:
            JSON whose data holds the padID ("g.xxx$pad_name")
        """
        return call_and_format(
            sdk_groups.create_group_pad, get_client(), group_id, pad_name, text=text
        )

    @app.tool()
    async def list_all_groups() -> str:
        """List all groups."""
        return call_and_format(sdk_groups.list_all_groups, get_client())

    return app

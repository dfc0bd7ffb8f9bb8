"""
Author tools for Etherpad MCP server.
"""

from etherpad_mcp.client_factory import call_and_format, get_client
from etherpad_mcp.sdk import authors as sdk_authors


def register_tools(app):
    """Register author tools with the MCP app."""

    @app.tool()
    async def create_author(name: str = None) -> str:
        """
        Create a new author.

        Args:
            name: Display name (optional)

        Returns:
            JSON whose data holds the new authorID
        """
        return call_and_format(sdk_authors.create_author, get_client(), name=name)

    @app.tool()
    async def create_author_if_not_exists_for(author_mapper: str, name: str = None) -> str:
        """
        Get the author mapped to an external user id, creating it if needed.

        Args:
            author_mapper: Identifier of the user in your own system
            name: Display name (optional, updates the existing author)
        """
        return call_and_format(
            sdk_authors.create_author_if_not_exists_for, get_client(), author_mapper, name=name
        )

    @app.tool()
    async def list_pads_of_author(author_id: str) -> str:
        """List the pads an author contributed to."""
        return call_and_format(sdk_authors.list_pads_of_author, get_client(), author_id)

    @app.tool()
    async def get_author_name(author_id: str) -> str:
        """Get the display name of an author."""
        return call_and_format(sdk_authors.get_author_name, get_client(), author_id)

    return app

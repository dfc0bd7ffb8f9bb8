"""
Pad content tools for Etherpad MCP server.

Read and write pad text/HTML, inspect revisions and diffs.
"""

from etherpad_mcp.client_factory import call_and_format, get_client
from etherpad_mcp.sdk import content as sdk_content


def register_tools(app):
    """Register pad content tools with the MCP app."""

    @app.tool()
    async def get_text(pad_id: str, rev: int = None) -> str:
        """
        Get the plain text of a pad.

        Args:
            pad_id: The pad
            rev: Revision number (optional, latest otherwise)

        Returns:
            JSON whose data holds text
        """
        return call_and_format(sdk_content.get_text, get_client(), pad_id, rev=rev)

    @app.tool()
    async def set_text(pad_id: str, text: str) -> str:
        """
        Replace the whole text of a pad.

        Args:
            pad_id: The pad
            text: New content
        """
        return call_and_format(sdk_content.set_text, get_client(), pad_id, text)

    @app.tool()
    async def append_text(pad_id: str, text: str) -> str:
        """
        Append text at the end of a pad.

        Args:
            pad_id: The pad
            text: Text to append
        """
        return call_and_format(sdk_content.append_text, get_client(), pad_id, text)

    @app.tool()
    async def get_html(pad_id: str, rev: int = None) -> str:
        """
        Get the content of a pad as HTML.

        Args:
            pad_id: The pad
            rev: Revision number (optional, latest otherwise)
        """
        return call_and_format(sdk_content.get_html, get_client(), pad_id, rev=rev)

    @app.tool()
    async def set_html(pad_id: str, html: str) -> str:
        """Replace the content of a pad with HTML."""
        return call_and_format(sdk_content.set_html, get_client(), pad_id, html)

    @app.tool()
    async def get_attribute_pool(pad_id: str) -> str:
        """Get the attribute pool (formatting attributes) of a pad."""
        return call_and_format(sdk_content.get_attribute_pool, get_client(), pad_id)

    @app.tool()
    async def get_revision_changeset(pad_id: str, rev: int = None) -> str:
        """Get the changeset of a revision (latest if rev is omitted)."""
        return call_and_format(sdk_content.get_revision_changeset, get_client(), pad_id, rev=rev)

    @app.tool()
    async def create_diff_html(pad_id: str, start_rev: int, end_rev: int) -> str:
        """
        Show what changed between two revisions.

        Args:
            pad_id: The pad
            start_rev: First revision
            end_rev: Last revision

        Returns:
            JSON whose data holds the diff as html and the authors involved
        """
        return call_and_format(
            sdk_content.create_diff_html, get_client(), pad_id, start_rev, end_rev
        )

    @app.tool()
    async def restore_revision(pad_id: str, rev: int) -> str:
        """
        Restore a pad to an earlier revision.

        The restore is recorded as a new revision.
        """
        return call_and_format(sdk_content.restore_revision, get_client(), pad_id, rev)

    return app

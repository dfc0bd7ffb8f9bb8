"""
Chat tools for Etherpad MCP server.
"""

from etherpad_mcp.client_factory import call_and_format, get_client
from etherpad_mcp.sdk import chat as sdk_chat
from etherpad_mcp.utils import to_unix_millis


def register_tools(app):
    """Register chat tools with the MCP app."""

    @app.tool()
    async def get_chat_history(pad_id: str, start: int = None, end: int = None) -> str:
        """
        Get the chat messages of a pad.

        Give both start and end to fetch a range, or neither for everything.

        Args:
            pad_id: The pad
            start: Index of the first message (optional)
            end: Index of the last message (optional)

        Returns:
            JSON whose data holds messages [{text, userId, time, userName}]
        """
        return call_and_format(sdk_chat.get_chat_history, get_client(), pad_id, start=start, end=end)

    @app.tool()
    async def get_chat_head(pad_id: str) -> str:
        """Get the index of the latest chat message (-1 if there is none)."""
        return call_and_format(sdk_chat.get_chat_head, get_client(), pad_id)

    @app.tool()
    async def append_chat_message(pad_id: str, text: str, author_id: str, time: str = None) -> str:
        """
        Post a chat message to a pad.

        Args:
            pad_id: The pad
            text: Message text
            author_id: Author posting the message
            time: Message time as unix milliseconds or ISO 8601 (optional, now otherwise)
        """
        timestamp = to_unix_millis(time) if time else None
        return call_and_format(
            sdk_chat.append_chat_message, get_client(), pad_id, text, author_id, time=timestamp
        )

    return app

"""
Etherpad chat SDK functions.
"""

from datetime import datetime
from typing import Optional, Union

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.operations import call_operation


def get_chat_history(
    client: EtherpadClient,
    pad_id: str,
    start: Optional[int] = None,
    end: Optional[int] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Get chat messages of a pad.

    GET getChatHistory

    Args:
        pad_id: The pad
        start: Index of the first message; requires end
        end: Index of the last message; requires start

    Returns:
        Response with data {messages: [{text, userId, time, userName}]}

    Raises:
        ValueError: If only one of start and end is given
    """
    if (start is None) != (end is None):
        raise ValueError("start and end must be given together")

    return call_operation(
        client,
        "getChatHistory",
        {"padID": pad_id, "start": start, "end": end},
        cancel=cancel,
    )


def get_chat_head(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Get the index of the last chat message.

    GET getChatHead

    Returns:
        Response with data {chatHead} (-1 when there is no message)
    """
    return call_operation(client, "getChatHead", {"padID": pad_id}, cancel=cancel)


def append_chat_message(
    client: EtherpadClient,
    pad_id: str,
    text: str,
    author_id: str,
    time: Optional[Union[int, datetime]] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Post a chat message to a pad.

    GET appendChatMessage

    Args:
        time: Message time as milliseconds since the epoch or datetime;
            server time when None
    """
    if isinstance(time, datetime):
        time = int(time.timestamp() * 1000)

    return call_operation(
        client,
        "appendChatMessage",
        {"padID": pad_id, "text": text, "authorID": author_id, "time": time},
        cancel=cancel,
    )

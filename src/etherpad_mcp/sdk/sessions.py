"""
Etherpad session SDK functions.

A session grants an author access to the pads of a group until validUntil.
"""

from datetime import datetime
from typing import Optional, Union

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.operations import call_operation


def create_session(
    client: EtherpadClient,
    group_id: str,
    author_id: str,
    valid_until: Union[int, datetime],
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Create a session for an author in a group.

    GET createSession

    Args:
        group_id: The group the session gives access to
        author_id: The author the session belongs to
        valid_until: Expiry as unix timestamp (seconds) or datetime.
            Naive datetimes are taken as local time.

    Returns:
        Response with data {sessionID}
    """
    if isinstance(valid_until, datetime):
        valid_until = int(valid_until.timestamp())

    return call_operation(
        client,
        "createSession",
        {"groupID": group_id, "authorID": author_id, "validUntil": valid_until},
        cancel=cancel,
    )


def delete_session(client: EtherpadClient, session_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET deleteSession"""
    return call_operation(client, "deleteSession", {"sessionID": session_id}, cancel=cancel)


def get_session_info(client: EtherpadClient, session_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Get a session's group, author and expiry.

    GET getSessionInfo

    Returns:
        Response with data {groupID, authorID, validUntil}
    """
    return call_operation(client, "getSessionInfo", {"sessionID": session_id}, cancel=cancel)


def list_sessions_of_group(client: EtherpadClient, group_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    GET listSessionsOfGroup

    Returns:
        Response whose data maps sessionID -> {groupID, authorID, validUntil}
    """
    return call_operation(client, "listSessionsOfGroup", {"groupID": group_id}, cancel=cancel)


def list_sessions_of_author(client: EtherpadClient, author_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    GET listSessionsOfAuthor

    Returns:
        Response whose data maps sessionID -> {groupID, authorID, validUntil}
    """
    return call_operation(client, "listSessionsOfAuthor", {"authorID": author_id}, cancel=cancel)

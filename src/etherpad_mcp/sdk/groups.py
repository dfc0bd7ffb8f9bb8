"""
Etherpad group SDK functions.

Groups own pads: a group pad is named "{groupID}${padName}" and is only
reachable through a session of that group.
"""

from typing import Optional

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.operations import call_operation


def create_group(client: EtherpadClient, cancel: Optional[CancelToken] = None) -> Response:
    """
    Create a new group.

    GET createGroup

    Returns:
        Response with data {groupID}
    """
    return call_operation(client, "createGroup", cancel=cancel)


def create_group_if_not_exists_for(
    client: EtherpadClient,
    group_mapper: str,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Create a group for an external id, or return the existing one.

    GET createGroupIfNotExistsFor

    Args:
        group_mapper: Identifier of the group in the calling system

    Returns:
        Response with data {groupID}
    """
    return call_operation(
        client, "createGroupIfNotExistsFor", {"groupMapper": group_mapper}, cancel=cancel
    )


def delete_group(client: EtherpadClient, group_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Delete a group and all its pads.

    GET deleteGroup
    """
    return call_operation(client, "deleteGroup", {"groupID": group_id}, cancel=cancel)


def list_pads(client: EtherpadClient, group_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    List the pads of a group.

    GET listPads

    Returns:
        Response with data {padIDs: [...]}
    """
    return call_operation(client, "listPads", {"groupID": group_id}, cancel=cancel)


def create_group_pad(
    client: EtherpadClient,
    group_id: str,
    pad_name: str,
    text: Optional[str] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Create a pad inside a group.

    GET createGroupPad

    Args:
        group_id: The owning group
        pad_name: Name of the pad within the group
        text: Initial text (server default when None)

    Returns:
        Response with data {padID}
    """
    return call_operation(
        client,
        "createGroupPad",
        {"groupID": group_id, "padName": pad_name, "text": text},
        cancel=cancel,
    )


def list_all_groups(client: EtherpadClient, cancel: Optional[CancelToken] = None) -> Response:
    """
    List all groups.

    GET listAllGroups

    Returns:
        Response with data {groupIDs: [...]}
    """
    return call_operation(client, "listAllGroups", cancel=cancel)

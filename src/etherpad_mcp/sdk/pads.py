"""
Etherpad pad SDK functions.

Pad lifecycle, revisions, users, read-only ids, access control.
"""

from typing import Optional

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.operations import call_operation


def create_pad(
    client: EtherpadClient,
    pad_id: str,
    text: Optional[str] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Create a new (non-group) pad.

    GET createPad

    Args:
        pad_id: Id of the new pad
        text: Initial text; the server's welcome text when None
    """
    return call_operation(client, "createPad", {"padID": pad_id, "text": text}, cancel=cancel)


def get_revisions_count(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET getRevisionsCount -> {revisions}"""
    return call_operation(client, "getRevisionsCount", {"padID": pad_id}, cancel=cancel)


def get_saved_revisions_count(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET getSavedRevisionsCount -> {savedRevisions}"""
    return call_operation(client, "getSavedRevisionsCount", {"padID": pad_id}, cancel=cancel)


def list_saved_revisions(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET listSavedRevisions -> {savedRevisions: [...]}"""
    return call_operation(client, "listSavedRevisions", {"padID": pad_id}, cancel=cancel)


def save_revision(
    client: EtherpadClient,
    pad_id: str,
    rev: Optional[int] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Mark a revision as saved (latest when rev is None).

    GET saveRevision
    """
    return call_operation(client, "saveRevision", {"padID": pad_id, "rev": rev}, cancel=cancel)


def pad_users_count(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET padUsersCount -> {padUsersCount}"""
    return call_operation(client, "padUsersCount", {"padID": pad_id}, cancel=cancel)


def pad_users(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET padUsers -> {padUsers: [{colorId, name, timestamp, id}]}"""
    return call_operation(client, "padUsers", {"padID": pad_id}, cancel=cancel)


def delete_pad(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Delete a pad.

    GET deletePad
    """
    return call_operation(client, "deletePad", {"padID": pad_id}, cancel=cancel)


def copy_pad(
    client: EtherpadClient,
    source_id: str,
    destination_id: str,
    force: Optional[bool] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Copy a pad including its history.

    GET copyPad

    Args:
        source_id: Pad to copy
        destination_id: Id of the copy
        force: Overwrite an existing destination. Sent as "false" when None.
    """
    return call_operation(
        client,
        "copyPad",
        {"sourceID": source_id, "destinationID": destination_id, "force": force},
        cancel=cancel,
    )


def move_pad(
    client: EtherpadClient,
    source_id: str,
    destination_id: str,
    force: Optional[bool] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Move (rename) a pad.

    GET movePad

    Args:
        force: Overwrite an existing destination. Sent as "false" when None.
    """
    return call_operation(
        client,
        "movePad",
        {"sourceID": source_id, "destinationID": destination_id, "force": force},
        cancel=cancel,
    )


def get_read_only_id(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET getReadOnlyID -> {readOnlyID}"""
    return call_operation(client, "getReadOnlyID", {"padID": pad_id}, cancel=cancel)


def get_pad_id(client: EtherpadClient, read_only_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET getPadID -> {padID}"""
    return call_operation(client, "getPadID", {"readOnlyID": read_only_id}, cancel=cancel)


def set_public_status(
    client: EtherpadClient,
    pad_id: str,
    public_status: bool,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Make a group pad public or private.

    GET setPublicStatus
    """
    return call_operation(
        client, "setPublicStatus", {"padID": pad_id, "publicStatus": public_status}, cancel=cancel
    )


def get_public_status(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET getPublicStatus -> {publicStatus}"""
    return call_operation(client, "getPublicStatus", {"padID": pad_id}, cancel=cancel)


def set_password(client: EtherpadClient, pad_id: str, password: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Protect a group pad with a password.

    GET setPassword
    """
    return call_operation(client, "setPassword", {"padID": pad_id, "password": password}, cancel=cancel)


def is_password_protected(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET isPasswordProtected -> {isPasswordProtected}"""
    return call_operation(client, "isPasswordProtected", {"padID": pad_id}, cancel=cancel)


def list_authors_of_pad(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET listAuthorsOfPad -> {authorIDs: [...]}"""
    return call_operation(client, "listAuthorsOfPad", {"padID": pad_id}, cancel=cancel)


def get_last_edited(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Get the time of the last edit.

    GET getLastEdited

    Returns:
        Response with data {lastEdited} in milliseconds since the epoch
    """
    return call_operation(client, "getLastEdited", {"padID": pad_id}, cancel=cancel)


def send_clients_message(client: EtherpadClient, pad_id: str, msg: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Send a custom message to every client connected to a pad.

    GET sendClientsMessage
    """
    return call_operation(client, "sendClientsMessage", {"padID": pad_id, "msg": msg}, cancel=cancel)


def list_all_pads(client: EtherpadClient, cancel: Optional[CancelToken] = None) -> Response:
    """
    List every pad on the instance.

    GET listAllPads

    Returns:
        Response with data {padIDs: [...]}
    """
    return call_operation(client, "listAllPads", cancel=cancel)

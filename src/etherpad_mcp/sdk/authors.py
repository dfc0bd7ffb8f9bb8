"""
Etherpad author SDK functions.
"""

from typing import Optional

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.operations import call_operation


def create_author(
    client: EtherpadClient,
    name: Optional[str] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Create a new author.

    GET createAuthor

    Returns:
        Response with data {authorID}
    """
    return call_operation(client, "createAuthor", {"name": name}, cancel=cancel)


def create_author_if_not_exists_for(
    client: EtherpadClient,
    author_mapper: str,
    name: Optional[str] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Create an author for an external id, or return the existing one.

    GET createAuthorIfNotExistsFor

    Args:
        author_mapper: Identifier of the user in the calling system
        name: Display name; updates the existing author's name when given

    Returns:
        Response with data {authorID}
    """
    return call_operation(
        client,
        "createAuthorIfNotExistsFor",
        {"authorMapper": author_mapper, "name": name},
        cancel=cancel,
    )


def list_pads_of_author(client: EtherpadClient, author_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET listPadsOfAuthor -> {padIDs: [...]}"""
    return call_operation(client, "listPadsOfAuthor", {"authorID": author_id}, cancel=cancel)


def get_author_name(client: EtherpadClient, author_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET getAuthorName -> {authorName}"""
    return call_operation(client, "getAuthorName", {"authorID": author_id}, cancel=cancel)

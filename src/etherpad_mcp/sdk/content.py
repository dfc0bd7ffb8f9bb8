"""
Etherpad pad content SDK functions.

Text, HTML, attribute pool, changesets and revision diffs.
"""

from typing import Optional

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.operations import call_operation


def get_text(
    client: EtherpadClient,
    pad_id: str,
    rev: Optional[int] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Get the text of a pad.

    GET getText

    Args:
        pad_id: The pad
        rev: Revision to read; latest when None

    Returns:
        Response with data {text}
    """
    return call_operation(client, "getText", {"padID": pad_id, "rev": rev}, cancel=cancel)


def set_text(client: EtherpadClient, pad_id: str, text: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Replace the text of a pad.

    GET setText
    """
    return call_operation(client, "setText", {"padID": pad_id, "text": text}, cancel=cancel)


def append_text(client: EtherpadClient, pad_id: str, text: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    Append text to the end of a pad.

    GET appendText
    """
    return call_operation(client, "appendText", {"padID": pad_id, "text": text}, cancel=cancel)


def get_html(
    client: EtherpadClient,
    pad_id: str,
    rev: Optional[int] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Get the content of a pad as HTML.

    GET getHTML

    Returns:
        Response with data {html}
    """
    return call_operation(client, "getHTML", {"padID": pad_id, "rev": rev}, cancel=cancel)


def set_html(client: EtherpadClient, pad_id: str, html: str, cancel: Optional[CancelToken] = None) -> Response:
    """GET setHTML"""
    return call_operation(client, "setHTML", {"padID": pad_id, "html": html}, cancel=cancel)


def get_attribute_pool(client: EtherpadClient, pad_id: str, cancel: Optional[CancelToken] = None) -> Response:
    """
    GET getAttributePool

    Returns:
        Response with data {pool: {numToAttrib, attribToNum, nextNum}}
    """
    return call_operation(client, "getAttributePool", {"padID": pad_id}, cancel=cancel)


def get_revision_changeset(
    client: EtherpadClient,
    pad_id: str,
    rev: Optional[int] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Get the changeset of a revision (latest when rev is None).

    GET getRevisionChangeset
    """
    return call_operation(
        client, "getRevisionChangeset", {"padID": pad_id, "rev": rev}, cancel=cancel
    )


def create_diff_html(
    client: EtherpadClient,
    pad_id: str,
    start_rev: int,
    end_rev: int,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Render the changes between two revisions as HTML.

    GET createDiffHTML

    Returns:
        Response with data {html, authors}
    """
    return call_operation(
        client,
        "createDiffHTML",
        {"padID": pad_id, "startRev": start_rev, "endRev": end_rev},
        cancel=cancel,
    )


def restore_revision(client: EtherpadClient, pad_id: str, rev: int, cancel: Optional[CancelToken] = None) -> Response:
    """
    Restore a pad to an earlier revision.

    GET restoreRevision
    """
    return call_operation(client, "restoreRevision", {"padID": pad_id, "rev": rev}, cancel=cancel)

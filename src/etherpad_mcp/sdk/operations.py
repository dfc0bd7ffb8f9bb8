"""
Table of Etherpad-Lite API operations.

Every operation is a GET on {base_url}/{api_version}/{name}. The table
records which parameters each one takes, so parameter shaping is done in
one place by call_operation().
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response


@dataclass(frozen=True)
class Operation:
    """An API operation and its parameters.

    Optional parameters left out by the caller are not sent, unless they
    have an entry in defaults, a tuple of (name, value) pairs.
    """
    name: str
    group: str
    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()
    defaults: Tuple[Tuple[str, Any], ...] = ()

    @property
    def parameters(self) -> Tuple[str, ...]:
        return self.required + self.optional

    def default_for(self, name: str) -> Any:
        return dict(self.defaults).get(name)


_FORCE_DEFAULT = (("force", False),)

OPERATIONS: Dict[str, Operation] = {op.name: op for op in (
    # Groups
    Operation("createGroup", "groups"),
    Operation("createGroupIfNotExistsFor", "groups", ("groupMapper",)),
    Operation("deleteGroup", "groups", ("groupID",)),
    Operation("listPads", "groups", ("groupID",)),
    Operation("createGroupPad", "groups", ("groupID", "padName"), ("text",)),
    Operation("listAllGroups", "groups"),
    # Authors
    Operation("createAuthor", "authors", (), ("name",)),
    Operation("createAuthorIfNotExistsFor", "authors", ("authorMapper",), ("name",)),
    Operation("listPadsOfAuthor", "authors", ("authorID",)),
    Operation("getAuthorName", "authors", ("authorID",)),
    # Sessions
    Operation("createSession", "sessions", ("groupID", "authorID", "validUntil")),
    Operation("deleteSession", "sessions", ("sessionID",)),
    Operation("getSessionInfo", "sessions", ("sessionID",)),
    Operation("listSessionsOfGroup", "sessions", ("groupID",)),
    Operation("listSessionsOfAuthor", "sessions", ("authorID",)),
    # Pad content
    Operation("getText", "content", ("padID",), ("rev",)),
    Operation("setText", "content", ("padID", "text")),
    Operation("appendText", "content", ("padID", "text")),
    Operation("getHTML", "content", ("padID",), ("rev",)),
    Operation("setHTML", "content", ("padID", "html")),
    Operation("getAttributePool", "content", ("padID",)),
    Operation("getRevisionChangeset", "content", ("padID",), ("rev",)),
    Operation("createDiffHTML", "content", ("padID", "startRev", "endRev")),
    Operation("restoreRevision", "content", ("padID", "rev")),
    # Chat
    Operation("getChatHistory", "chat", ("padID",), ("start", "end")),
    Operation("getChatHead", "chat", ("padID",)),
    Operation("appendChatMessage", "chat", ("padID", "text", "authorID"), ("time",)),
    # Pads
    Operation("createPad", "pads", ("padID",), ("text",)),
    Operation("getRevisionsCount", "pads", ("padID",)),
    Operation("getSavedRevisionsCount", "pads", ("padID",)),
    Operation("listSavedRevisions", "pads", ("padID",)),
    Operation("saveRevision", "pads", ("padID",), ("rev",)),
    Operation("padUsersCount", "pads", ("padID",)),
    Operation("padUsers", "pads", ("padID",)),
    Operation("deletePad", "pads", ("padID",)),
    Operation("copyPad", "pads", ("sourceID", "destinationID"), ("force",), _FORCE_DEFAULT),
    Operation("movePad", "pads", ("sourceID", "destinationID"), ("force",), _FORCE_DEFAULT),
    Operation("getReadOnlyID", "pads", ("padID",)),
    Operation("getPadID", "pads", ("readOnlyID",)),
    Operation("setPublicStatus", "pads", ("padID", "publicStatus")),
    Operation("getPublicStatus", "pads", ("padID",)),
    Operation("setPassword", "pads", ("padID", "password")),
    Operation("isPasswordProtected", "pads", ("padID",)),
    Operation("listAuthorsOfPad", "pads", ("padID",)),
    Operation("getLastEdited", "pads", ("padID",)),
    Operation("sendClientsMessage", "pads", ("padID", "msg")),
    Operation("listAllPads", "pads"),
    # Auth
    Operation("checkToken", "auth"),
)}


def get_operation(name: str) -> Operation:
    """Look up an operation by its API name.

    Raises:
        ValueError: If the operation is unknown
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown Etherpad operation '{name}'") from None


def build_params(operation: Operation, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Shape the per-call parameters of an operation.

    Drops optional parameters that are None, fills in defaults.

    Raises:
        ValueError: On unknown or missing required parameters
    """
    params = dict(params or {})

    unknown = sorted(set(params) - set(operation.parameters))
    if unknown:
        raise ValueError(
            f"Unknown parameters for {operation.name}: {', '.join(unknown)}. "
            f"Accepted: {', '.join(operation.parameters) or 'none'}"
        )

    missing = [name for name in operation.required if params.get(name) is None]
    if missing:
        raise ValueError(
            f"Missing required parameters for {operation.name}: {', '.join(missing)}"
        )

    shaped = {name: params[name] for name in operation.required}
    for name in operation.optional:
        value = params.get(name)
        if value is None:
            value = operation.default_for(name)
        if value is not None:
            shaped[name] = value
    return shaped


def call_operation(
    client: EtherpadClient,
    name: str,
    params: Optional[Dict[str, Any]] = None,
    cancel: Optional[CancelToken] = None,
) -> Response:
    """
    Validate parameters against the table and send the request.

    Args:
        client: EtherpadClient instance
        name: API operation name (e.g. "createPad")
        params: Parameters keyed by their API names
        cancel: Optional CancelToken

    Returns:
        The decoded Response
    """
    operation = get_operation(name)
    return client.make_request(operation.name, build_params(operation, params), cancel=cancel)

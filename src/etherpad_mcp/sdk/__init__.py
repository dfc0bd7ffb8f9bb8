"""
Etherpad-Lite Low-Level SDK.

Thin typed wrapper over the Etherpad-Lite HTTP API.
Each function maps 1:1 to an API operation and returns the decoded
Response envelope.
"""

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.errors import (
    EtherpadClientError,
    EtherpadDecodeError,
    EtherpadError,
    EtherpadURLError,
    RequestCancelled,
)
from etherpad_mcp.sdk.operations import OPERATIONS, Operation, call_operation
from etherpad_mcp.sdk.types import (
    API_KEY_PARAM,
    CURRENT_VERSION,
    DEFAULT_BASE_URL,
    ReturnCode,
    describe_code,
)

__all__ = [
    "CancelToken",
    "EtherpadClient",
    "Response",
    "EtherpadClientError",
    "EtherpadDecodeError",
    "EtherpadError",
    "EtherpadURLError",
    "RequestCancelled",
    "OPERATIONS",
    "Operation",
    "call_operation",
    "API_KEY_PARAM",
    "CURRENT_VERSION",
    "DEFAULT_BASE_URL",
    "ReturnCode",
    "describe_code",
]

"""Exception classes for the Etherpad SDK.

All exceptions raised by the SDK itself inherit from EtherpadClientError.
Transport failures are not wrapped: they surface as the
requests.RequestException family exactly as requests raised them.
"""

from typing import TYPE_CHECKING, Optional

from etherpad_mcp.sdk.types import describe_code

if TYPE_CHECKING:
    from etherpad_mcp.sdk.client import Response


class EtherpadClientError(Exception):
    """Base exception for all errors originating from the SDK."""


class EtherpadURLError(EtherpadClientError, ValueError):
    """Raised when the base URL cannot be combined into a request URL.

    Raised before any network I/O takes place.

    Attributes:
        url: The composed URL that was rejected.
    """

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class EtherpadDecodeError(EtherpadClientError, ValueError):
    """Raised when a response body is not a valid Etherpad envelope.

    Covers bodies that are not JSON at all and JSON values that lack the
    code/message/data fields.

    Attributes:
        body: The raw response text.
    """

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class RequestCancelled(EtherpadClientError):
    """Raised when the caller's CancelToken fired before the call completed.

    Distinct from transport errors: the request either never went out or
    its outcome was abandoned.

    Attributes:
        endpoint: The operation that was cancelled.
    """

    def __init__(self, endpoint: str):
        super().__init__(f"Request to {endpoint} was cancelled")
        self.endpoint = endpoint


class EtherpadError(EtherpadClientError):
    """Application-level error reported by Etherpad (code != 0).

    Only raised when the client is configured with
    raise_etherpad_errors=True.

    Attributes:
        code: The numeric return code.
        message: The message sent by Etherpad.
        response: The decoded Response envelope.
    """

    def __init__(self, code: int, message: str, response: Optional["Response"] = None):
        super().__init__(f"{describe_code(code)}: {message}")
        self.code = code
        self.message = message
        self.response = response

"""
Etherpad authentication SDK functions.
"""

from typing import Optional

from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.client import EtherpadClient, Response
from etherpad_mcp.sdk.operations import call_operation


def check_token(client: EtherpadClient, cancel: Optional[CancelToken] = None) -> Response:
    """
    Check that the configured API key is accepted.

    GET checkToken

    Returns:
        Response with code 0 when the key is valid, 4 otherwise
    """
    return call_operation(client, "checkToken", cancel=cancel)

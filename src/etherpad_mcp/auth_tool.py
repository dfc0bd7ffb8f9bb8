"""
Connection tools for Etherpad MCP server.

Provides API key checking, connection info, a generic operation call and
the feature list.
"""

import json
import logging

from etherpad_mcp.client_factory import call_and_format, get_client
from etherpad_mcp.sdk import auth as sdk_auth
from etherpad_mcp.sdk import operations as sdk_operations

logger = logging.getLogger(__name__)


def register_tools(app):
    """Register connection and discovery tools with the MCP app."""

    @app.tool()
    async def check_token() -> str:
        """
        Check that the configured API key is accepted by Etherpad.

        Returns:
            JSON with code 0 when the key is valid
        """
        return call_and_format(sdk_auth.check_token, get_client())

    @app.tool()
    async def get_connection_info() -> str:
        """
        Get the Etherpad instance this server talks to.

        Returns:
            JSON with base_url, api_version, timeout and raise_errors
        """
        client = get_client()
        return json.dumps({
            "base_url": client.base_url,
            "api_version": client.api_version,
            "timeout_seconds": client.timeout,
            "raise_errors": client.raise_etherpad_errors,
        }, indent=2)

    @app.tool()
    async def call_etherpad_api(operation: str, params: dict = None) -> str:
        """
        Call any Etherpad API operation by its API name.

        Use this for operations without a dedicated tool or when you
        already know the raw parameter names.

        Args:
            operation: API name, e.g. "getText" or "copyPad"
            params: Parameters keyed by API name, e.g. {"padID": "notes"}

        Returns:
            JSON with code, status, message and data
        """
        logger.info("Generic call to %s", operation)
        return call_and_format(sdk_operations.call_operation, get_client(), operation, params)

    @app.tool()
    async def get_available_features() -> str:
        """
        Get the list of Etherpad operations available through this server.

        Returns:
            JSON with operations grouped by area, with their parameters
        """
        groups = {}
        for op in sdk_operations.OPERATIONS.values():
            groups.setdefault(op.group, []).append({
                "operation": op.name,
                "required": list(op.required),
                "optional": list(op.optional),
            })

        features = {
            "platform": "Etherpad-Lite",
            "api_version": get_client().api_version,
            "operations": groups,
            "notes": [
                "Every tool returns {code, status, message, data}; code 0 means success",
                "Group pads are addressed as 'groupID$padName'",
                "call_etherpad_api accepts any operation listed here",
            ],
        }
        return json.dumps(features, indent=2)

    return app

"""
MCP Server for Etherpad-Lite

Provides tools to create, read, edit and manage Etherpad pads, groups,
authors, sessions and chat via the Model Context Protocol (MCP).

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For multi-user HTTP server deployment
"""

import logging
import os

from fastmcp import FastMCP

from etherpad_mcp import auth_tool
from etherpad_mcp import authors
from etherpad_mcp import chat
from etherpad_mcp import content
from etherpad_mcp import groups
from etherpad_mcp import pads
from etherpad_mcp import sessions
from etherpad_mcp.sdk.types import CURRENT_VERSION


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP(f"Etherpad-Lite v{CURRENT_VERSION}")

    # Connection, generic call and discovery
    app = auth_tool.register_tools(app)

    app = pads.register_tools(app)
    app = content.register_tools(app)
    app = groups.register_tools(app)
    app = authors.register_tools(app)
    app = sessions.register_tools(app)
    app = chat.register_tools(app)

    return app


def configure_logging() -> None:
    """Log to stderr at ETHERPAD_LOG_LEVEL (default: INFO)."""
    level = os.environ.get("ETHERPAD_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    configure_logging()
    app = create_app()

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()

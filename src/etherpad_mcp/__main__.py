"""
Entry point for running etherpad_mcp as a module.

Usage:
    python -m etherpad_mcp                        # Run with stdio transport
    python -m etherpad_mcp --http                 # Run with HTTP transport
    python -m etherpad_mcp --http --port 9000     # Run HTTP on custom port
    python -m etherpad_mcp call createPad padID=foo text=hello
"""

import argparse
import os
import sys

import requests

from etherpad_mcp import configure_logging, create_app
from etherpad_mcp.client_factory import format_response, get_client, handle_etherpad_error
from etherpad_mcp.sdk.cancel import CancelToken
from etherpad_mcp.sdk.errors import EtherpadError, RequestCancelled
from etherpad_mcp.sdk.operations import call_operation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Etherpad MCP Server - Etherpad-Lite HTTP API over MCP"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8081,
        help="Port for HTTP transport (default: 8081)"
    )

    subparsers = parser.add_subparsers(dest="command")
    call = subparsers.add_parser(
        "call",
        help="Call a single API operation and print the JSON response"
    )
    call.add_argument("operation", help="API operation name, e.g. createPad")
    call.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Operation parameters by API name, e.g. padID=foo"
    )
    call.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Cancel the call after this many seconds"
    )
    return parser


def parse_params(pairs):
    """Parse KEY=VALUE arguments into a dict.

    Raises:
        ValueError: If an argument has no '='
    """
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid parameter '{pair}', expected KEY=VALUE")
        params[key] = value
    return params


def run_call(args) -> int:
    """Run the 'call' sub-command. Returns the process exit status."""
    try:
        params = parse_params(args.params)
        client = get_client()
        cancel = CancelToken(timeout=args.deadline) if args.deadline else None
        response = call_operation(client, args.operation, params, cancel=cancel)
    except EtherpadError as e:
        print(handle_etherpad_error(e))
        return 1
    except RequestCancelled as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except requests.RequestException as e:
        print(f"error: request failed: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_response(response))
    return 0 if response.ok else 1


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging()

    if args.command == "call":
        return run_call(args)

    # Set environment variables for the app
    if args.http:
        os.environ["MCP_TRANSPORT"] = "http"
        os.environ["MCP_HOST"] = args.host
        os.environ["MCP_PORT"] = str(args.port)
    else:
        os.environ["MCP_TRANSPORT"] = "stdio"

    app = create_app()

    if args.http:
        print(f"Starting Etherpad MCP server on http://{args.host}:{args.port}/mcp")
        app.run(transport="http", host=args.host, port=args.port)
    else:
        app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

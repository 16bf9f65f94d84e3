"""
rendevu command line.

Provides commands:
- mcp: Run the Cal.com MCP server over stdio
- http: Run the webhook and AI HTTP app
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


def register_server_commands(subparsers: argparse._SubParsersAction) -> None:
    """Register server CLI commands."""

    # mcp
    mcp_parser = subparsers.add_parser(
        "mcp",
        help="Run the Cal.com MCP server over stdio",
    )
    mcp_parser.set_defaults(func=cmd_mcp)

    # http
    http_parser = subparsers.add_parser(
        "http",
        help="Run the webhook receiver and AI routes",
    )
    http_parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST})",
    )
    http_parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    http_parser.set_defaults(func=cmd_http)


def cmd_mcp(args: argparse.Namespace) -> int:
    """Serve the MCP tools on stdio."""
    from rendevu.server import create_server

    mcp = create_server()
    mcp.run()
    return 0


def cmd_http(args: argparse.Namespace) -> int:
    """Serve the HTTP app with uvicorn."""
    import uvicorn

    from rendevu.http import create_http_app

    try:
        app = create_http_app()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    uvicorn.run(app, host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rendevu",
        description="Cal.com MCP tools, webhook relay and AI assistant",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    register_server_commands(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    # stdout carries the MCP stdio transport
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

"""
Entry point for running fitonex_mcp as a module.

Usage:
    python -m fitonex_mcp                                # stdio transport
    python -m fitonex_mcp --http --port 9000             # HTTP on custom port
    python -m fitonex_mcp --api-url https://api.example  # custom API
"""

import argparse
import logging
import os

from fitonex_mcp import configure_logging, create_app

logger = logging.getLogger("fitonex_mcp")


def main():
    parser = argparse.ArgumentParser(
        description="FitONEX MCP Server - gyms, workouts, videos and check-ins"
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
    parser.add_argument(
        "--api-url",
        default=None,
        help="FitONEX API base URL (default: $FITONEX_API_URL or http://localhost:8080)"
    )

    args = parser.parse_args()

    if args.api_url:
        os.environ["FITONEX_API_URL"] = args.api_url

    configure_logging()
    app = create_app()

    if args.http:
        logger.info(f"Starting FitONEX MCP server on http://{args.host}:{args.port}/mcp")
        app.run(transport="http", host=args.host, port=args.port)
    else:
        app.run()


if __name__ == "__main__":
    main()

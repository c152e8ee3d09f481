"""
MCP Server for the FitONEX fitness-tracking service.

Provides tools to authenticate with FitONEX, discover gyms, browse
instruction videos, log exercises, plan workouts and keep check-in
streaks via the Model Context Protocol (MCP).

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For multi-user HTTP server deployment
"""

import logging
import os

from fastmcp import FastMCP

from fitonex_mcp import auth_tool
from fitonex_mcp import checkins
from fitonex_mcp import exercises
from fitonex_mcp import gyms
from fitonex_mcp import machines
from fitonex_mcp import search
from fitonex_mcp import videos
from fitonex_mcp import workouts


def configure_logging() -> None:
    """Configure root logging from FITONEX_LOG_LEVEL (default: INFO)."""
    level = os.environ.get("FITONEX_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("FitONEX v1.0")

    app = auth_tool.register_tools(app)
    app = gyms.register_tools(app)
    app = machines.register_tools(app)
    app = videos.register_tools(app)
    app = checkins.register_tools(app)
    app = exercises.register_tools(app)
    app = workouts.register_tools(app)
    app = search.register_tools(app)

    return app


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    - FITONEX_API_URL: FitONEX API base URL
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

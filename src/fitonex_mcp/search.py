"""
Search tool for FitONEX MCP server.
"""

from fastmcp import Context

from fitonex_mcp.api import search as api_search
from fitonex_mcp.client_factory import get_client, render

MAX_PAGE_SIZE = 50


def register_tools(app):
    """Register search tools with the MCP app."""

    @app.tool()
    async def search_catalog(
        query: str,
        ctx: Context,
        search_type: str = "gym",
        prefix: bool = False,
        limit: int = 10,
        cursor: str = None,
    ) -> str:
        """
        Search gyms or machines by name, best match first.

        Args:
            query: Name to look for
            search_type: "gym" (default) or "machine"
            prefix: True to match names starting with query (autocomplete)
            limit: Page size (default: 10, max: 50)
            cursor: next_cursor from a previous call

        Returns:
            JSON page {items, next_cursor, has_more}; items carry id, name,
            score and address (gyms) or body_part (machines)
        """
        client = get_client(ctx)
        outcome = api_search.SearchClient(client).search(
            query, search_type=search_type, prefix=prefix,
            limit=min(limit, MAX_PAGE_SIZE), cursor=cursor,
        )
        return render(outcome, client)

    return app

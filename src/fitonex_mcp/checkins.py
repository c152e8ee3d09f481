"""
Check-in tools for FitONEX MCP server.
"""

from fastmcp import Context

from fitonex_mcp.api import checkins as api_checkins
from fitonex_mcp.client_factory import get_client, render


def register_tools(app):
    """Register check-in tools with the MCP app."""

    @app.tool()
    async def checkin_today(ctx: Context) -> str:
        """
        Check in for today. Calling it twice on the same day is harmless.

        Returns:
            JSON {checkin, inserted}; inserted is false if already checked in
        """
        client = get_client(ctx)
        return render(api_checkins.CheckinClient(client).checkin_today(), client)

    @app.tool()
    async def get_checkin_stats(ctx: Context) -> str:
        """
        Get check-in streaks.

        Returns:
            JSON {current_streak_days, longest_streak_days, last_checkin_day}
        """
        client = get_client(ctx)
        return render(api_checkins.CheckinClient(client).get_checkin_stats(), client)

    return app

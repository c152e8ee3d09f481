"""
Gym discovery tools for FitONEX MCP server.

Nearby search, gym details, machines, prices and reviews.
Delegates to api.gyms for the heavy lifting.
"""

from fastmcp import Context

from fitonex_mcp.api import gyms as api_gyms
from fitonex_mcp.client_factory import get_client, render

MAX_PAGE_SIZE = 50


def register_tools(app):
    """Register gym tools with the MCP app."""

    @app.tool()
    async def find_nearby_gyms(
        lat: float,
        lng: float,
        ctx: Context,
        radius_km: float = 5.0,
        limit: int = 20,
        cursor: str = None,
    ) -> str:
        """
        Find gyms near a coordinate, nearest first.

        Args:
            lat: Latitude in degrees
            lng: Longitude in degrees
            radius_km: Search radius in kilometers (default: 5.0)
            limit: Page size (default: 20, max: 50)
            cursor: next_cursor from a previous call to get the next page

        Returns:
            JSON page {items, next_cursor, has_more} of gyms with distance_m
        """
        client = get_client(ctx)
        outcome = api_gyms.GymClient(client).list_nearby_gyms(
            lat, lng, radius_km=radius_km, limit=min(limit, MAX_PAGE_SIZE), cursor=cursor,
        )
        return render(outcome, client)

    @app.tool()
    async def get_gym(gym_id: str, ctx: Context) -> str:
        """
        Get a gym's details: address, contact, rating, machine count.

        Args:
            gym_id: Gym id from find_nearby_gyms
        """
        client = get_client(ctx)
        return render(api_gyms.GymClient(client).get_gym(gym_id), client)

    @app.tool()
    async def get_gym_machines(gym_id: str, ctx: Context) -> str:
        """
        List the machines available at a gym.

        Args:
            gym_id: Gym id
        """
        client = get_client(ctx)
        return render(api_gyms.GymClient(client).get_gym_machines(gym_id), client)

    @app.tool()
    async def get_gym_prices(gym_id: str, ctx: Context) -> str:
        """
        List a gym's membership plans (price_cents per period).

        Args:
            gym_id: Gym id
        """
        client = get_client(ctx)
        return render(api_gyms.GymClient(client).get_gym_prices(gym_id), client)

    @app.tool()
    async def get_gym_reviews(gym_id: str, ctx: Context, limit: int = 20, cursor: str = None) -> str:
        """
        List reviews of a gym, newest first.

        Args:
            gym_id: Gym id
            limit: Page size (default: 20, max: 50)
            cursor: "next" value from a previous call

        Returns:
            JSON {reviews, next}
        """
        client = get_client(ctx)
        outcome = api_gyms.GymClient(client).list_gym_reviews(
            gym_id, limit=min(limit, MAX_PAGE_SIZE), cursor=cursor,
        )
        return render(outcome, client)

    @app.tool()
    async def review_gym(gym_id: str, rating: int, ctx: Context, comment: str = "") -> str:
        """
        Rate a gym. Requires login.

        Args:
            gym_id: Gym id
            rating: Integer from 1 to 5
            comment: Optional free text
        """
        client = get_client(ctx)
        return render(api_gyms.GymClient(client).create_gym_review(gym_id, rating, comment), client)

    return app

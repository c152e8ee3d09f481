"""
Workout tools for FitONEX MCP server.

Saved workouts: name, description, duration in minutes and type.
"""

from fastmcp import Context

from fitonex_mcp.api import workouts as api_workouts
from fitonex_mcp.client_factory import get_client, render

MAX_PAGE_SIZE = 50


def register_tools(app):
    """Register workout tools with the MCP app."""

    @app.tool()
    async def list_workouts(ctx: Context, limit: int = 20, cursor: str = None) -> str:
        """
        List saved workouts, newest first. Requires login.

        Args:
            limit: Page size (default: 20, max: 50)
            cursor: "next" value from a previous call

        Returns:
            JSON {workouts, next}
        """
        client = get_client(ctx)
        outcome = api_workouts.WorkoutClient(client).list_workouts(
            limit=min(limit, MAX_PAGE_SIZE), cursor=cursor,
        )
        return render(outcome, client)

    @app.tool()
    async def create_workout(
        name: str,
        ctx: Context,
        description: str = "",
        duration: int = 0,
        workout_type: str = "",
    ) -> str:
        """
        Save a workout.

        Args:
            name: Workout name
            description: Optional description
            duration: Length in minutes
            workout_type: Free-form type, e.g. "strength"
        """
        client = get_client(ctx)
        outcome = api_workouts.WorkoutClient(client).create_workout(
            name, description=description, duration=duration, workout_type=workout_type,
        )
        return render(outcome, client)

    @app.tool()
    async def get_workout(workout_id: str, ctx: Context) -> str:
        """
        Get a saved workout.

        Args:
            workout_id: Workout id
        """
        client = get_client(ctx)
        return render(api_workouts.WorkoutClient(client).get_workout(workout_id), client)

    @app.tool()
    async def update_workout(
        workout_id: str,
        name: str,
        ctx: Context,
        description: str = "",
        duration: int = 0,
        workout_type: str = "",
    ) -> str:
        """
        Replace a saved workout. Fields left out are reset to their defaults.

        Args:
            workout_id: Workout id
            name: Workout name
            description: Description
            duration: Length in minutes
            workout_type: Free-form type
        """
        client = get_client(ctx)
        outcome = api_workouts.WorkoutClient(client).update_workout(
            workout_id, name, description=description, duration=duration, workout_type=workout_type,
        )
        return render(outcome, client)

    @app.tool()
    async def delete_workout(workout_id: str, ctx: Context) -> str:
        """
        Delete a saved workout.

        Args:
            workout_id: Workout id
        """
        client = get_client(ctx)
        return render(api_workouts.WorkoutClient(client).delete_workout(workout_id), client)

    return app

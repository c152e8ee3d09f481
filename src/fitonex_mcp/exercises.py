"""
Workout log tools for FitONEX MCP server.

Log exercises with their sets and read them back by day.
"""

from fastmcp import Context

from fitonex_mcp.api import exercises as api_exercises
from fitonex_mcp.client_factory import get_client, render

MAX_PAGE_SIZE = 50


def register_tools(app):
    """Register exercise log tools with the MCP app."""

    @app.tool()
    async def log_exercise(
        day: str,
        name: str,
        sets: list[dict],
        ctx: Context,
        gym_id: str = None,
        machine_id: str = None,
    ) -> str:
        """
        Log an exercise performed on a day.

        Args:
            day: Date in YYYY-MM-DD format
            name: Exercise name, e.g. "Bench Press"
            sets: List of sets, each {"set_index": 0, "reps": 10,
                  "weight_kg": 60.0, "rpe": 8, "notes": "..."};
                  set_index and reps are required
            gym_id: Gym where it was performed (optional)
            machine_id: Machine used (optional)

        Returns:
            JSON exercise with its sets ordered by set_index
        """
        client = get_client(ctx)
        outcome = api_exercises.ExerciseClient(client).create_exercise(
            day, name, sets, gym_id=gym_id, machine_id=machine_id,
        )
        return render(outcome, client)

    @app.tool()
    async def list_exercises(day: str, ctx: Context, limit: int = 20, cursor: str = None) -> str:
        """
        List exercises logged on a day.

        Args:
            day: Date in YYYY-MM-DD format
            limit: Page size (default: 20, max: 50)
            cursor: next_cursor from a previous call

        Returns:
            JSON page {items, next_cursor, has_more}
        """
        client = get_client(ctx)
        outcome = api_exercises.ExerciseClient(client).list_exercises(
            day, limit=min(limit, MAX_PAGE_SIZE), cursor=cursor,
        )
        return render(outcome, client)

    @app.tool()
    async def get_exercise(exercise_id: str, ctx: Context) -> str:
        """
        Get one logged exercise with its sets.

        Args:
            exercise_id: Exercise id
        """
        client = get_client(ctx)
        return render(api_exercises.ExerciseClient(client).get_exercise(exercise_id), client)

    return app

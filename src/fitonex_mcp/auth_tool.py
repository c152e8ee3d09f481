"""
Authentication tools for FitONEX MCP server.

Provides login, registration, session management, and profile tools.
"""

import json
import logging

from fastmcp import Context

from fitonex_mcp.api import auth as api_auth
from fitonex_mcp.api import flags as api_flags
from fitonex_mcp.client_factory import get_client, render
from fitonex_mcp.sdk.result import Outcome

logger = logging.getLogger(__name__)


def _render_auth(outcome: Outcome) -> str:
    """Like render(), but never echo the bearer token back."""
    if not outcome.success:
        return render(outcome)
    return json.dumps({
        "success": True,
        "data": {"user": outcome.value.user.to_dict()},
        "message": "Session stored",
    }, indent=2)


def register_tools(app):
    """Register authentication and profile tools with the MCP app."""

    @app.tool()
    async def fitonex_login(email: str, password: str, ctx: Context) -> str:
        """
        Login to FitONEX.

        Stores the session credential for subsequent calls. A failed login
        keeps any previous session.

        Args:
            email: Account email address
            password: Account password

        Returns:
            JSON with the user, or error message
        """
        client = get_client(ctx)
        return _render_auth(api_auth.AuthClient(client).login(email, password))

    @app.tool()
    async def fitonex_register(email: str, password: str, name: str, ctx: Context) -> str:
        """
        Create a FitONEX account and log in.

        Args:
            email: Account email address
            password: Account password
            name: Display name

        Returns:
            JSON with the new user, or error message
        """
        client = get_client(ctx)
        return _render_auth(api_auth.AuthClient(client).register(email, password, name))

    @app.tool()
    async def fitonex_logout(ctx: Context) -> str:
        """
        Logout from the current FitONEX session.

        Returns:
            Logout confirmation
        """
        client = get_client(ctx)
        outcome = api_auth.AuthClient(client).logout()
        if outcome.success:
            return json.dumps({"success": True, "message": "Logged out"}, indent=2)
        return render(outcome)

    @app.tool()
    async def fitonex_session_status(ctx: Context) -> str:
        """
        Check whether this session holds a FitONEX credential.

        Returns:
            JSON {"authenticated": bool}
        """
        client = get_client(ctx)
        return json.dumps({"authenticated": client.is_logged_in}, indent=2)

    @app.tool()
    async def get_profile(ctx: Context) -> str:
        """
        Get the signed-in user's profile.

        Returns:
            JSON with id, email, name and timestamps
        """
        client = get_client(ctx)
        return render(api_auth.ProfileClient(client).get_profile(), client)

    @app.tool()
    async def update_profile(ctx: Context, name: str = None, email: str = None) -> str:
        """
        Update the signed-in user's name and/or email.

        Args:
            name: New display name (optional)
            email: New email address (optional)

        Returns:
            JSON with the updated profile
        """
        client = get_client(ctx)
        return render(api_auth.ProfileClient(client).update_profile(name=name, email=email), client)

    @app.tool()
    async def get_feature_flags(ctx: Context) -> str:
        """
        Get FitONEX feature flags as evaluated for this session.

        Returns:
            JSON mapping of flag name to enabled
        """
        client = get_client(ctx)
        return render(api_flags.FeatureFlagClient(client).get_feature_flags(), client)

    @app.tool()
    async def get_available_features(ctx: Context) -> str:
        """
        Get list of available FitONEX tools.

        Returns:
            JSON with available feature categories
        """
        features = {
            "platform": "FitONEX",
            "auth": [
                "fitonex_login - Authenticate with email and password",
                "fitonex_register - Create an account",
                "fitonex_logout - Clear session",
                "fitonex_session_status - Is a credential stored?",
            ],
            "profile": [
                "get_profile - Current user",
                "update_profile - Change name or email",
            ],
            "flags": [
                "get_feature_flags - Feature flags for this session",
            ],
            "search": [
                "search_catalog - Gyms or machines by name (paginated, prefix mode)",
            ],
            "gyms": [
                "find_nearby_gyms - Gyms around a coordinate (paginated)",
                "get_gym - Gym details",
                "get_gym_machines - Machines available at a gym",
                "get_gym_prices - Membership plans",
                "get_gym_reviews - Reviews (paginated)",
                "review_gym - Rate a gym 1-5",
            ],
            "machines": [
                "search_machines - Search catalog by name or body part",
                "get_machine - Machine details",
                "list_body_parts - Body-part categories",
            ],
            "videos": [
                "list_videos - Instruction videos for a machine (paginated)",
                "get_video - Video details",
                "request_video_upload - Pre-signed upload URLs",
                "finalize_video - Register an uploaded video",
                "like_video / unlike_video - Toggle like",
            ],
            "checkins": [
                "checkin_today - Daily check-in",
                "get_checkin_stats - Current and longest streak",
            ],
            "exercises": [
                "log_exercise - Log an exercise with sets",
                "list_exercises - Exercises logged on a day (paginated)",
                "get_exercise - Exercise with its sets",
            ],
            "workouts": [
                "list_workouts - Saved workouts (paginated)",
                "create_workout / update_workout - Save or replace a workout",
                "get_workout / delete_workout - Fetch or remove a workout",
            ],
            "notes": [
                "Paginated tools return next_cursor; pass it back as cursor for the next page",
                "Video bytes are uploaded out of band to the pre-signed URL",
            ],
        }
        return json.dumps(features, indent=2)

    return app

"""
Client factory for the FitONEX MCP server.

Each MCP connection gets its own SessionStore file so that the bearer
credential survives across HTTP requests of the same session:
    {FITONEX_SESSION_DIR}/{session_id}.json
"""

import json
import logging
import os
from pathlib import Path

from fastmcp import Context

from fitonex_mcp.api import FitonexApi
from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.result import Outcome
from fitonex_mcp.sdk.session import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_SESSION_DIR = "/data/fitonex_sessions"
LOCAL_SESSION_ID = "local"


def session_dir() -> Path:
    return Path(os.environ.get("FITONEX_SESSION_DIR", DEFAULT_SESSION_DIR))


def session_file_path(session_id: str) -> Path:
    """Get the file path for a session's credential."""
    # Sanitize session_id to prevent path traversal
    safe_session_id = "".join(c for c in session_id if c.isalnum() or c in "-_")
    return session_dir() / f"{safe_session_id or LOCAL_SESSION_ID}.json"


def _session_id(ctx: Context) -> str:
    try:
        return ctx.session_id or LOCAL_SESSION_ID
    except RuntimeError:
        # session_id not available (not in request context)
        return LOCAL_SESSION_ID


def get_client(ctx: Context) -> FitonexClient:
    """
    Get a FitONEX client bound to this MCP session's credential.

    Usage in tools:
        @app.tool()
        async def get_gym(gym_id: str, ctx: Context) -> str:
            client = get_client(ctx)
            return render(GymClient(client).get_gym(gym_id))
    """
    store = SessionStore(session_file_path(_session_id(ctx)))
    return FitonexClient(session=store)


def render(outcome: Outcome, client: FitonexClient = None) -> str:
    """
    Serialize an Outcome for a tool response.

    A 401 means the stored credential is no longer accepted; it is dropped
    so the next call prompts for a fresh login.
    """
    if client is not None and not outcome.success and outcome.status_code == 401:
        logger.info("Credential rejected by server, clearing session")
        FitonexApi(client).auth.logout()
        result = outcome.to_dict()
        result["note"] = "Your FitONEX session has expired. Please log in again."
        return json.dumps(result, indent=2)
    return json.dumps(outcome.to_dict(), indent=2)

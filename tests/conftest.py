"""
Shared pytest fixtures for FitONEX testing.
"""
import json
import pytest
import requests
from unittest.mock import Mock, patch

# Monkey-patch: production uses fastmcp.FastMCP, tests use mcp.server.fastmcp.
# Patch fastmcp.Context to match mcp.server.fastmcp.Context so tools work
# with the test FastMCP.
import fastmcp
from mcp.server.fastmcp import server as mcp_server
fastmcp.Context = mcp_server.Context

from mcp.server.fastmcp import FastMCP

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.session import SessionStore


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def make_response(status_code=200, json_body=None, text=None, reason="OK"):
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if json_body is not None:
        response._content = json.dumps(json_body).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode()
    response.encoding = "utf-8"
    return response


USER = {
    "id": "u-1",
    "email": "test@test.com",
    "name": "TestUser",
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-01T00:00:00Z",
}

GYM = {
    "id": "g-1",
    "name": "Iron Temple",
    "lat": 47.61,
    "lng": -122.33,
    "address": "1 Pike St",
    "created_at": "2024-01-01T00:00:00Z",
    "distance_m": 120.5,
    "avg_rating": 4.5,
    "machines_count": 12,
}

MACHINE = {
    "id": "m-1",
    "name": "Leg Press",
    "body_part": "legs",
    "created_at": "2024-01-01T00:00:00Z",
}

VIDEO = {
    "id": "v-1",
    "machine_id": "m-1",
    "uploader_id": "u-1",
    "title": "Leg press basics",
    "video_key": "videos/v-1.mp4",
    "created_at": "2024-01-01T00:00:00Z",
    "like_count": 3,
    "is_liked": False,
}

EXERCISE = {
    "id": "e-1",
    "user_id": "u-1",
    "name": "Bench Press",
    "created_at": "2024-01-01T10:00:00Z",
    "sets": [
        {"id": "s-1", "exercise_id": "e-1", "set_index": 0, "reps": 10, "weight_kg": 60.0},
    ],
}

CHECKIN = {
    "id": "c-1",
    "user_id": "u-1",
    "day": "2024-01-01",
    "created_at": "2024-01-01T08:00:00Z",
}

WORKOUT = {
    "id": "w-1",
    "user_id": "u-1",
    "name": "Push day",
    "description": "Chest and triceps",
    "duration": 45,
    "type": "strength",
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-01T00:00:00Z",
}


@pytest.fixture
def session_store():
    """In-memory session store with no credential."""
    return SessionStore()


@pytest.fixture
def sdk_client(session_store):
    """Real FitonexClient whose make_request is mocked.

    Resource Clients and tools run for real on top of it; only the
    network call is replaced.
    """
    client = FitonexClient(base_url="http://api.test", session=session_store)
    client.make_request = Mock()
    return client


@pytest.fixture(autouse=True)
def mock_get_client(sdk_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Yields the mock function (not the client) so tests can inspect calls
    or swap the client.
    """
    get_client_fn = Mock(return_value=sdk_client)

    modules_to_patch = [
        "fitonex_mcp.auth_tool",
        "fitonex_mcp.gyms",
        "fitonex_mcp.machines",
        "fitonex_mcp.videos",
        "fitonex_mcp.checkins",
        "fitonex_mcp.exercises",
        "fitonex_mcp.workouts",
        "fitonex_mcp.search",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_client", get_client_fn)
        p.start()
        patchers.append(p)

    yield get_client_fn

    for p in patchers:
        p.stop()


def create_test_app(module):
    """Helper to create a FastMCP app with a specific module registered."""
    app = FastMCP(f"Test FitONEX {module.__name__}")
    app = module.register_tools(app)
    return app

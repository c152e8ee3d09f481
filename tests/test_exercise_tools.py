"""
Tests for FitONEX MCP exercise log tools.
"""
import json
import pytest

from fitonex_mcp import exercises
from tests.conftest import EXERCISE, create_test_app, get_tool_result_text


@pytest.fixture
def app_with_exercises():
    return create_test_app(exercises)


@pytest.mark.asyncio
async def test_log_exercise(app_with_exercises, sdk_client):
    """Test log_exercise sends ordered sets and returns the stored exercise."""
    sdk_client.make_request.return_value = EXERCISE

    result = await app_with_exercises.call_tool("log_exercise", {
        "day": "2024-01-01",
        "name": "Bench Press",
        "sets": [
            {"set_index": 1, "reps": 8, "weight_kg": 65.0},
            {"set_index": 0, "reps": 10, "weight_kg": 60.0},
        ],
    })

    data = json.loads(get_tool_result_text(result))
    assert data["success"] is True
    assert data["data"]["sets"][0]["reps"] == 10

    payload = sdk_client.make_request.call_args.kwargs["json_data"]
    assert [s["set_index"] for s in payload["sets"]] == [0, 1]
    assert payload["gym_id"] is None


@pytest.mark.asyncio
async def test_log_exercise_rejects_empty_sets(app_with_exercises, sdk_client):
    result = await app_with_exercises.call_tool("log_exercise", {
        "day": "2024-01-01", "name": "Bench Press", "sets": [],
    })

    data = json.loads(get_tool_result_text(result))
    assert data["success"] is False
    assert data["error_code"] == "INVALID_INPUT"
    sdk_client.make_request.assert_not_called()


@pytest.mark.asyncio
async def test_log_exercise_rejects_bad_rpe(app_with_exercises, sdk_client):
    result = await app_with_exercises.call_tool("log_exercise", {
        "day": "2024-01-01",
        "name": "Squat",
        "sets": [{"set_index": 0, "reps": 5, "rpe": 11}],
    })

    data = json.loads(get_tool_result_text(result))
    assert "rpe" in data["error"]


@pytest.mark.asyncio
async def test_list_exercises(app_with_exercises, sdk_client):
    sdk_client.make_request.return_value = {"items": [EXERCISE], "next_cursor": None, "has_more": False}

    result = await app_with_exercises.call_tool("list_exercises", {"day": "2024-01-01"})

    data = json.loads(get_tool_result_text(result))
    assert data["data"]["items"][0]["name"] == "Bench Press"
    assert sdk_client.make_request.call_args.kwargs["params"]["day"] == "2024-01-01"


@pytest.mark.asyncio
async def test_get_exercise(app_with_exercises, sdk_client):
    sdk_client.make_request.return_value = EXERCISE

    result = await app_with_exercises.call_tool("get_exercise", {"exercise_id": "e-1"})

    assert json.loads(get_tool_result_text(result))["data"]["id"] == "e-1"

"""
FitONEX workout SDK functions.

Workouts are the signed-in user's saved templates (name, description,
duration in minutes, type). Updates replace every field.
"""

from typing import Optional

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.models import Workout, WorkoutList


def _workout_payload(name: str, description: str, duration: int, workout_type: str) -> dict:
    name = (name or "").strip()
    if not name:
        raise ValueError("Workout name is required")
    if duration < 0:
        raise ValueError("duration must be non-negative")
    return {
        "name": name,
        "description": description or "",
        "duration": duration,
        "type": workout_type or "",
    }


def get_workouts(client: FitonexClient, limit: int = 20, cursor: Optional[str] = None) -> WorkoutList:
    """
    List the user's workouts, newest first.

    GET v1/workouts

    Returns:
        WorkoutList ({workouts, next})
    """
    data = client.make_request("GET", "v1/workouts", params={"limit": limit, "cursor": cursor})
    return WorkoutList.from_dict(data)


def create_workout(
    client: FitonexClient,
    name: str,
    description: str = "",
    duration: int = 0,
    workout_type: str = "",
) -> Workout:
    """
    POST v1/workouts

    Raises:
        ValueError: If name is empty or duration negative
    """
    payload = _workout_payload(name, description, duration, workout_type)
    return Workout.from_dict(client.make_request("POST", "v1/workouts", json_data=payload))


def get_workout(client: FitonexClient, workout_id: str) -> Workout:
    """
    GET v1/workouts/{id}
    """
    return Workout.from_dict(
        client.make_request("GET", "v1/workouts/{id}", path_params={"id": workout_id})
    )


def update_workout(
    client: FitonexClient,
    workout_id: str,
    name: str,
    description: str = "",
    duration: int = 0,
    workout_type: str = "",
) -> Workout:
    """
    Replace a workout's fields.

    PUT v1/workouts/{id}
    """
    payload = _workout_payload(name, description, duration, workout_type)
    data = client.make_request(
        "PUT", "v1/workouts/{id}", path_params={"id": workout_id}, json_data=payload,
    )
    return Workout.from_dict(data)


def delete_workout(client: FitonexClient, workout_id: str) -> bool:
    """
    DELETE v1/workouts/{id}

    Returns:
        True once the server acknowledged the delete
    """
    client.make_request("DELETE", "v1/workouts/{id}", path_params={"id": workout_id})
    return True

"""
FitONEX exercise log SDK functions.
"""

from dataclasses import fields
from typing import Iterable, List, Optional, Union

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.models import Exercise, Page, SetInput, validate_day

_SET_FIELDS = {f.name for f in fields(SetInput)}


def to_set_inputs(sets: Iterable[Union[SetInput, dict]]) -> List[SetInput]:
    """Coerce dicts to SetInput, validate, and order by set_index."""
    result = []
    for s in sets:
        try:
            set_input = s if isinstance(s, SetInput) else SetInput(
                **{k: v for k, v in s.items() if k in _SET_FIELDS}
            )
            set_input.validate()
        except (AttributeError, TypeError) as e:
            # wrong field types surface as TypeError from the comparisons in validate()
            raise ValueError(f"Invalid set {s!r}: {e}") from e
        result.append(set_input)
    return sorted(result, key=lambda s: s.set_index)


def create_exercise(
    client: FitonexClient,
    day: str,
    name: str,
    sets: Iterable[Union[SetInput, dict]],
    gym_id: Optional[str] = None,
    machine_id: Optional[str] = None,
) -> Exercise:
    """
    Log an exercise with its sets.

    POST v1/exercises

    Args:
        day: Calendar day in YYYY-MM-DD format
        name: Exercise name (e.g. "Bench Press")
        sets: SetInput records or dicts {set_index, reps, weight_kg, rpe, notes}

    Raises:
        ValueError: If day, name or sets are invalid
    """
    day = validate_day(day)
    name = (name or "").strip()
    if not name:
        raise ValueError("name is required")
    set_inputs = to_set_inputs(sets)
    if not set_inputs:
        raise ValueError("at least one set is required")

    data = client.make_request(
        "POST",
        "v1/exercises",
        json_data={
            "day": day,
            "gym_id": gym_id or None,
            "machine_id": machine_id or None,
            "name": name,
            "sets": [s.to_dict() for s in set_inputs],
        },
    )
    return Exercise.from_dict(data)


def get_exercises(
    client: FitonexClient,
    day: str,
    limit: int = 20,
    cursor: Optional[str] = None,
) -> Page[Exercise]:
    """
    List the exercises logged on a day.

    GET v1/exercises
    """
    data = client.make_request(
        "GET",
        "v1/exercises",
        params={"day": validate_day(day), "limit": limit, "cursor": cursor},
    )
    return Page.from_dict(data, Exercise.from_dict)


def get_exercise(client: FitonexClient, exercise_id: str) -> Exercise:
    """
    GET v1/exercises/{id}
    """
    return Exercise.from_dict(
        client.make_request("GET", "v1/exercises/{id}", path_params={"id": exercise_id})
    )

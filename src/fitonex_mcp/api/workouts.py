"""
Workout Resource Client: the user's saved workouts.
"""

from typing import Optional

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import workouts as sdk_workouts
from fitonex_mcp.sdk.models import Workout, WorkoutList
from fitonex_mcp.sdk.pagination import CursorPager
from fitonex_mcp.sdk.result import Outcome


class WorkoutClient(ResourceClient):

    def list_workouts(self, limit: int = 20, cursor: Optional[str] = None) -> Outcome[WorkoutList]:
        return self._run("Fetch workouts", sdk_workouts.get_workouts, limit=limit, cursor=cursor)

    def create_workout(
        self, name: str, description: str = "", duration: int = 0, workout_type: str = "",
    ) -> Outcome[Workout]:
        return self._run(
            "Create workout", sdk_workouts.create_workout,
            name, description=description, duration=duration, workout_type=workout_type,
        )

    def get_workout(self, workout_id: str) -> Outcome[Workout]:
        return self._run("Fetch workout", sdk_workouts.get_workout, workout_id)

    def update_workout(
        self, workout_id: str, name: str, description: str = "", duration: int = 0, workout_type: str = "",
    ) -> Outcome[Workout]:
        return self._run(
            "Update workout", sdk_workouts.update_workout,
            workout_id, name, description=description, duration=duration, workout_type=workout_type,
        )

    def delete_workout(self, workout_id: str) -> Outcome[bool]:
        return self._run("Delete workout", sdk_workouts.delete_workout, workout_id)

    def workouts_pager(self, limit: int = 20) -> CursorPager[Workout]:
        def fetch(cursor):
            outcome = self.list_workouts(limit=limit, cursor=cursor)
            if not outcome.success:
                return outcome
            return Outcome.ok(outcome.value.as_page())

        return CursorPager(fetch)

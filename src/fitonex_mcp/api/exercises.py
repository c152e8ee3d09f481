"""
Exercise log Resource Client.
"""

from typing import Iterable, Optional, Union

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import exercises as sdk_exercises
from fitonex_mcp.sdk.models import Exercise, Page, SetInput
from fitonex_mcp.sdk.pagination import CursorPager
from fitonex_mcp.sdk.result import Outcome


class ExerciseClient(ResourceClient):

    def create_exercise(
        self,
        day: str,
        name: str,
        sets: Iterable[Union[SetInput, dict]],
        gym_id: Optional[str] = None,
        machine_id: Optional[str] = None,
    ) -> Outcome[Exercise]:
        return self._run(
            "Create exercise", sdk_exercises.create_exercise,
            day, name, sets, gym_id=gym_id, machine_id=machine_id,
        )

    def list_exercises(self, day: str, limit: int = 20, cursor: Optional[str] = None) -> Outcome[Page[Exercise]]:
        return self._run("Fetch exercises", sdk_exercises.get_exercises, day, limit=limit, cursor=cursor)

    def get_exercise(self, exercise_id: str) -> Outcome[Exercise]:
        return self._run("Fetch exercise", sdk_exercises.get_exercise, exercise_id)

    def exercises_pager(self, day: str, limit: int = 20) -> CursorPager[Exercise]:
        return CursorPager(lambda cursor: self.list_exercises(day, limit=limit, cursor=cursor))

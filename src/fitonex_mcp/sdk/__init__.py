"""
FitONEX Low-Level SDK.

Thin typed wrapper over the FitONEX REST API.
Each function maps 1:1 to an endpoint and raises FitonexApiError subclasses
on failure; the Resource Clients in fitonex_mcp.api turn those into Outcomes.
"""

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.errors import (
    ApiConnectionError,
    ApiDecodeError,
    ApiHTTPError,
    FitonexApiError,
)
from fitonex_mcp.sdk.models import (
    AuthResponse,
    Checkin,
    CheckinStats,
    CheckinToday,
    Exercise,
    ExerciseSet,
    Gym,
    GymPrice,
    GymReview,
    GymReviews,
    InstructionVideo,
    Machine,
    Page,
    SearchHit,
    SetInput,
    UploadTarget,
    User,
    Workout,
    WorkoutList,
)
from fitonex_mcp.sdk.pagination import CursorPager, LoadedPage, PageLoadError
from fitonex_mcp.sdk.result import Outcome
from fitonex_mcp.sdk.session import SessionStore

__all__ = [
    "FitonexClient",
    "SessionStore",
    "Outcome",
    "CursorPager", "LoadedPage", "PageLoadError",
    "FitonexApiError", "ApiConnectionError", "ApiHTTPError", "ApiDecodeError",
    "AuthResponse", "User",
    "Gym", "GymPrice", "GymReview", "GymReviews", "Machine",
    "InstructionVideo", "UploadTarget",
    "Checkin", "CheckinToday", "CheckinStats",
    "Exercise", "ExerciseSet", "SetInput",
    "Workout", "WorkoutList",
    "SearchHit",
    "Page",
]

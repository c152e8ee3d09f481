"""
Resource Clients: one per FitONEX resource.

Every method returns an Outcome and never raises. Composes with the
low-level SDK internally.

Modules:
    auth       register, login, logout, profile
    gyms       nearby gyms, machines, prices, reviews
    machines   machine catalog search
    videos     instruction videos, upload flow, likes
    checkins   daily check-in and streaks
    exercises  workout log
    workouts   saved workouts
    search     gyms or machines by name
    flags      feature flags
"""

from fitonex_mcp.api.auth import AuthClient, ProfileClient
from fitonex_mcp.api.checkins import CheckinClient
from fitonex_mcp.api.exercises import ExerciseClient
from fitonex_mcp.api.flags import FeatureFlagClient
from fitonex_mcp.api.gyms import GymClient
from fitonex_mcp.api.machines import MachineClient
from fitonex_mcp.api.search import SearchClient
from fitonex_mcp.api.videos import VideoClient
from fitonex_mcp.api.workouts import WorkoutClient
from fitonex_mcp.sdk.client import FitonexClient


class FitonexApi:
    """All Resource Clients sharing one transport and session."""

    def __init__(self, client: FitonexClient):
        self.client = client
        self.auth = AuthClient(client)
        self.profile = ProfileClient(client)
        self.gyms = GymClient(client)
        self.machines = MachineClient(client)
        self.videos = VideoClient(client)
        self.checkins = CheckinClient(client)
        self.exercises = ExerciseClient(client)
        self.workouts = WorkoutClient(client)
        self.search = SearchClient(client)
        self.flags = FeatureFlagClient(client)


__all__ = [
    "FitonexApi",
    "AuthClient", "ProfileClient",
    "GymClient", "MachineClient", "VideoClient",
    "CheckinClient", "ExerciseClient",
    "WorkoutClient", "SearchClient", "FeatureFlagClient",
]

"""
Gym Resource Client: find gyms, their machines, prices and reviews.
"""

from typing import List, Optional

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import gyms as sdk_gyms
from fitonex_mcp.sdk.models import Gym, GymPrice, GymReview, GymReviews, Machine, Page
from fitonex_mcp.sdk.pagination import CursorPager
from fitonex_mcp.sdk.result import Outcome


class GymClient(ResourceClient):

    def list_nearby_gyms(
        self,
        lat: float,
        lng: float,
        radius_km: float = 5.0,
        limit: int = 20,
        cursor: Optional[str] = None,
    ) -> Outcome[Page[Gym]]:
        return self._run(
            "Fetch nearby gyms", sdk_gyms.get_nearby_gyms,
            lat, lng, radius_km=radius_km, limit=limit, cursor=cursor,
        )

    def get_gym(self, gym_id: str) -> Outcome[Gym]:
        return self._run("Fetch gym", sdk_gyms.get_gym, gym_id)

    def get_gym_machines(self, gym_id: str) -> Outcome[List[Machine]]:
        return self._run("Fetch gym machines", sdk_gyms.get_gym_machines, gym_id)

    def get_gym_prices(self, gym_id: str) -> Outcome[List[GymPrice]]:
        return self._run("Fetch gym prices", sdk_gyms.get_gym_prices, gym_id)

    def list_gym_reviews(self, gym_id: str, limit: int = 20, cursor: Optional[str] = None) -> Outcome[GymReviews]:
        return self._run("Fetch gym reviews", sdk_gyms.get_gym_reviews, gym_id, limit=limit, cursor=cursor)

    def create_gym_review(self, gym_id: str, rating: int, comment: str = "") -> Outcome[GymReview]:
        return self._run("Create review", sdk_gyms.create_gym_review, gym_id, rating, comment)

    def nearby_gyms_pager(
        self, lat: float, lng: float, radius_km: float = 5.0, limit: int = 20,
    ) -> CursorPager[Gym]:
        return CursorPager(
            lambda cursor: self.list_nearby_gyms(lat, lng, radius_km=radius_km, limit=limit, cursor=cursor)
        )

    def reviews_pager(self, gym_id: str, limit: int = 20) -> CursorPager[GymReview]:
        def fetch(cursor):
            outcome = self.list_gym_reviews(gym_id, limit=limit, cursor=cursor)
            if not outcome.success:
                return outcome
            return Outcome.ok(outcome.value.as_page())

        return CursorPager(fetch)

"""
FitONEX gym SDK functions.
"""

from typing import List, Optional

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.models import Gym, GymPrice, GymReview, GymReviews, Machine, Page, decode_list

MIN_RATING = 1
MAX_RATING = 5


def get_nearby_gyms(
    client: FitonexClient,
    lat: float,
    lng: float,
    radius_km: float = 5.0,
    limit: int = 20,
    cursor: Optional[str] = None,
) -> Page[Gym]:
    """
    List gyms around a coordinate, nearest first.

    GET v1/gyms/nearby

    Returns:
        Page of Gym with server-computed distance_m
    """
    data = client.make_request(
        "GET",
        "v1/gyms/nearby",
        params={
            "lat": lat,
            "lng": lng,
            "radius_km": radius_km,
            "limit": limit,
            "cursor": cursor,
        },
    )
    return Page.from_dict(data, Gym.from_dict)


def get_gym(client: FitonexClient, gym_id: str) -> Gym:
    """
    GET v1/gyms/{id}
    """
    return Gym.from_dict(client.make_request("GET", "v1/gyms/{id}", path_params={"id": gym_id}))


def get_gym_machines(client: FitonexClient, gym_id: str) -> List[Machine]:
    """
    GET v1/gyms/{id}/machines
    """
    data = client.make_request("GET", "v1/gyms/{id}/machines", path_params={"id": gym_id})
    return decode_list(Machine, data or [])


def get_gym_prices(client: FitonexClient, gym_id: str) -> List[GymPrice]:
    """
    GET v1/gyms/{id}/prices
    """
    data = client.make_request("GET", "v1/gyms/{id}/prices", path_params={"id": gym_id})
    return decode_list(GymPrice, data or [])


def get_gym_reviews(
    client: FitonexClient,
    gym_id: str,
    limit: int = 20,
    cursor: Optional[str] = None,
) -> GymReviews:
    """
    List reviews for a gym, newest first.

    GET v1/gyms/{id}/reviews

    Returns:
        GymReviews ({reviews, next})
    """
    data = client.make_request(
        "GET",
        "v1/gyms/{id}/reviews",
        path_params={"id": gym_id},
        params={"limit": limit, "cursor": cursor},
    )
    return GymReviews.from_dict(data)


def create_gym_review(client: FitonexClient, gym_id: str, rating: int, comment: str = "") -> GymReview:
    """
    Review a gym.

    POST v1/gyms/{id}/reviews

    Raises:
        ValueError: If rating is outside 1..5
    """
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(f"rating must be between {MIN_RATING} and {MAX_RATING}")

    data = client.make_request(
        "POST",
        "v1/gyms/{id}/reviews",
        path_params={"id": gym_id},
        json_data={"rating": rating, "comment": comment or ""},
    )
    return GymReview.from_dict(data)

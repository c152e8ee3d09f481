"""
FitONEX catalog search SDK functions.
"""

from typing import Optional

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.models import Page, SearchHit

SEARCH_TYPES = ("gym", "machine")


def search(
    client: FitonexClient,
    query: str,
    search_type: str = "gym",
    prefix: bool = False,
    limit: int = 10,
    cursor: Optional[str] = None,
) -> Page[SearchHit]:
    """
    Search gyms or machines by name, best match first.

    GET v1/search

    Args:
        query: Text to match; an empty query yields an empty page
        search_type: "gym" or "machine"
        prefix: Match names starting with query instead of by similarity

    Raises:
        ValueError: If search_type is unknown
    """
    search_type = (search_type or "gym").strip().lower()
    if search_type not in SEARCH_TYPES:
        raise ValueError("type must be gym or machine")

    data = client.make_request(
        "GET",
        "v1/search",
        params={
            "query": query,
            "type": search_type,
            "mode": "prefix" if prefix else None,
            "limit": limit,
            "cursor": cursor,
        },
    )
    return Page.from_dict(data, SearchHit.from_dict)

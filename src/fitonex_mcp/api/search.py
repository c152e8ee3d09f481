"""
Search Resource Client: gyms or machines by name.
"""

from typing import Optional

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import search as sdk_search
from fitonex_mcp.sdk.models import Page, SearchHit
from fitonex_mcp.sdk.pagination import CursorPager
from fitonex_mcp.sdk.result import Outcome


class SearchClient(ResourceClient):

    def search(
        self,
        query: str,
        search_type: str = "gym",
        prefix: bool = False,
        limit: int = 10,
        cursor: Optional[str] = None,
    ) -> Outcome[Page[SearchHit]]:
        return self._run(
            "Search", sdk_search.search,
            query, search_type=search_type, prefix=prefix, limit=limit, cursor=cursor,
        )

    def search_pager(
        self, query: str, search_type: str = "gym", prefix: bool = False, limit: int = 10,
    ) -> CursorPager[SearchHit]:
        return CursorPager(
            lambda cursor: self.search(query, search_type=search_type, prefix=prefix, limit=limit, cursor=cursor)
        )

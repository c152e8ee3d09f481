"""
Cursor pagination.

CursorPager turns a "fetch page by cursor" function into a forward-only,
restartable sequence of pages.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from fitonex_mcp.sdk.errors import FitonexApiError
from fitonex_mcp.sdk.models import Page
from fitonex_mcp.sdk.result import Outcome

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchResult = Union[Page, Outcome]


class PageLoadError(RuntimeError):
    """A page could not be loaded while iterating a pager."""

    def __init__(self, outcome: Outcome):
        super().__init__(outcome.error)
        self.outcome = outcome


@dataclass(frozen=True)
class LoadedPage(Generic[T]):
    """A page as seen by the pager.

    key is the cursor that loaded the page (None for the first page);
    next_key is the cursor for the following page, None when terminal.
    """
    items: Tuple[T, ...]
    key: Optional[str]
    next_key: Optional[str]


class CursorPager(Generic[T]):
    """
    Sequential page loader over a cursor-accepting fetch function.

    fetch(cursor) may return a Page, an Outcome wrapping a Page, or raise
    FitonexApiError. Not safe for concurrent use: callers must serialize
    calls on one instance.
    """

    def __init__(self, fetch: Callable[[Optional[str]], FetchResult], initial_cursor: Optional[str] = None):
        self._fetch = fetch
        self._initial_cursor = initial_cursor
        self._pages: List[LoadedPage[T]] = []
        self._resume_key: Optional[str] = initial_cursor
        self._exhausted = False

    @property
    def pages_loaded(self) -> List[LoadedPage[T]]:
        return list(self._pages)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def load_next(self, prior_cursor: Optional[str] = None) -> Outcome[LoadedPage[T]]:
        """
        Load one page.

        Args:
            prior_cursor: Cursor returned by the previous load; the initial
                cursor is used when omitted

        Returns:
            Outcome with the LoadedPage, or the fetch failure. A failure
            leaves the pager state untouched.
        """
        cursor = prior_cursor if prior_cursor is not None else self._initial_cursor
        outcome = self._call(cursor)
        if not outcome.success:
            logger.debug(f"Page load failed at cursor={cursor!r}: {outcome.error}")
            return outcome

        page = outcome.value
        loaded = LoadedPage(items=tuple(page.items), key=cursor, next_key=page.next)
        self._pages.append(loaded)
        return Outcome.ok(loaded)

    def refresh_key(self, anchor_position: Optional[int]) -> Optional[str]:
        """
        Key to reload from so that the item at anchor_position is refreshed.

        Returns the key of the loaded page closest to the anchor, or None
        when there is no anchor or nothing has been loaded.
        """
        if anchor_position is None or not self._pages:
            return None
        start = 0
        for page in self._pages:
            end = start + len(page.items)
            if anchor_position < end:
                return page.key
            start = end
        return self._pages[-1].key

    def pages(self) -> Iterator[Tuple[T, ...]]:
        """
        Yield pages until the last one.

        Raises:
            PageLoadError: If a load fails; iterating again resumes at the
                same cursor.
        """
        while not self._exhausted:
            outcome = self.load_next(self._resume_key)
            if not outcome.success:
                raise PageLoadError(outcome)
            loaded = outcome.value
            self._resume_key = loaded.next_key
            if loaded.next_key is None:
                self._exhausted = True
            yield loaded.items

    def items(self) -> Iterator[T]:
        for page in self.pages():
            yield from page

    def _call(self, cursor: Optional[str]) -> Outcome[Page]:
        try:
            result = self._fetch(cursor)
        except FitonexApiError as e:
            return Outcome.from_error("Load page", e)

        if isinstance(result, Outcome):
            return result
        return Outcome.ok(result)

"""Protocol definitions for dependency injection."""

from typing import Any, Optional, Protocol

from pagedlist.core.models import ListSnapshot, Page


class PageSource(Protocol):
    async def fetch_page(self, cursor: Optional[Any] = None) -> Page: ...


class StateObserver(Protocol):
    def __call__(self, snapshot: ListSnapshot) -> None: ...

"""Page source serving slices of an in-memory sequence."""

from typing import Any, Optional, Sequence

from pagedlist.core.models import Page


class InMemoryPageSource:
    """Pages over a fixed sequence using integer offsets as cursors."""

    def __init__(self, records: Sequence[Any] = (), page_size: int = 20):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.records = list(records)
        self.page_size = page_size
        self.fetch_count = 0

    async def fetch_page(self, cursor: Optional[Any] = None) -> Page:
        self.fetch_count += 1
        start = int(cursor or 0)
        end = min(start + self.page_size, len(self.records))
        next_cursor = end if end < len(self.records) else None
        return Page(records=tuple(self.records[start:end]), next_cursor=next_cursor)

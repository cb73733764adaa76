"""Incremental loading of paginated remote collections into a single list."""

from pagedlist.core import (
    CancelledStale,
    DecodeError,
    ListSnapshot,
    LoadPhase,
    Page,
    PageLoadError,
    PageSource,
    TransportError,
    describe_error,
)
from pagedlist.managers import PaginatedListController, PaginationManager, PrefetchPolicy

__version__ = "0.1.0"

__all__ = [
    "CancelledStale",
    "DecodeError",
    "ListSnapshot",
    "LoadPhase",
    "Page",
    "PageLoadError",
    "PageSource",
    "PaginatedListController",
    "PaginationManager",
    "PrefetchPolicy",
    "TransportError",
    "describe_error",
]

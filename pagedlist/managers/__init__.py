"""Manager classes for list state."""

from .list_controller import PaginatedListController
from .pagination_manager import PaginationManager
from .prefetch_manager import DEFAULT_LOOK_AHEAD, PrefetchPolicy

__all__ = [
    "PaginatedListController",
    "PaginationManager",
    "PrefetchPolicy",
    "DEFAULT_LOOK_AHEAD",
]

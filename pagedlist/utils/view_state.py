"""What a display surface should show for a given list snapshot."""

from enum import Enum

from pagedlist.core.models import ListSnapshot


class ContentMode(Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    LIST = "list"


def content_mode(snapshot: ListSnapshot) -> ContentMode:
    # Full-screen states only replace an empty list; loaded rows stay visible
    if snapshot.items:
        return ContentMode.LIST
    if snapshot.is_loading_initial:
        return ContentMode.LOADING
    if snapshot.last_error is not None:
        return ContentMode.ERROR
    if not snapshot.can_load_more:
        return ContentMode.EMPTY
    return ContentMode.LIST


def show_loading_footer(snapshot: ListSnapshot) -> bool:
    return snapshot.is_loading_more


def show_error_banner(snapshot: ListSnapshot) -> bool:
    return snapshot.last_error is not None and bool(snapshot.items)

"""Text formatting utilities."""

from pagedlist.core.errors import describe_error
from pagedlist.core.models import ListSnapshot


def format_count(count: int, noun: str = "item") -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def format_status(snapshot: ListSnapshot) -> str:
    if snapshot.is_loading_initial and not snapshot.items:
        return "Loading..."

    status = f"Showing {format_count(snapshot.item_count)}"
    if not snapshot.can_load_more:
        status += " (end of list)"
    return status


def format_error(snapshot: ListSnapshot) -> str:
    if snapshot.last_error is None:
        return ""
    return f"Error: {describe_error(snapshot.last_error)}"

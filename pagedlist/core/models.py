"""Data types shared by the list controller and its collaborators."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from pagedlist.core.errors import PageLoadError


@dataclass(frozen=True)
class Page:
    """One batch of records returned by a page source.

    ``next_cursor`` is None when the source has no further pages.
    """

    records: Tuple[Any, ...] = ()
    next_cursor: Optional[Any] = None

    def __post_init__(self):
        if not isinstance(self.records, tuple):
            object.__setattr__(self, "records", tuple(self.records))

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None


class LoadPhase(Enum):
    IDLE = "idle"
    LOADING_INITIAL = "loading_initial"
    LOADING_MORE = "loading_more"
    EXHAUSTED = "exhausted"


def phase_of(is_loading_initial: bool, is_loading_more: bool, can_load_more: bool) -> LoadPhase:
    if is_loading_initial:
        return LoadPhase.LOADING_INITIAL
    if is_loading_more:
        return LoadPhase.LOADING_MORE
    if not can_load_more:
        return LoadPhase.EXHAUSTED
    return LoadPhase.IDLE


class LoadKind(Enum):
    INITIAL = "initial"
    MORE = "more"


@dataclass(frozen=True)
class LoadTicket:
    """Identifies a single in-flight fetch."""

    kind: LoadKind
    generation: int
    cursor: Optional[Any] = None


@dataclass
class ListState:
    items: Tuple[Any, ...] = ()
    page_cursor: Optional[Any] = None
    is_loading_initial: bool = False
    is_loading_more: bool = False
    can_load_more: bool = True
    last_error: Optional[PageLoadError] = None
    generation: int = 0

    @property
    def phase(self) -> LoadPhase:
        return phase_of(self.is_loading_initial, self.is_loading_more, self.can_load_more)


@dataclass(frozen=True)
class ListSnapshot:
    """Read-only view of the list state handed to observers."""

    items: Tuple[Any, ...] = ()
    is_loading_initial: bool = False
    is_loading_more: bool = False
    can_load_more: bool = True
    last_error: Optional[PageLoadError] = None
    page_cursor: Optional[Any] = None

    @classmethod
    def of(cls, state: ListState) -> "ListSnapshot":
        return cls(
            items=state.items,
            is_loading_initial=state.is_loading_initial,
            is_loading_more=state.is_loading_more,
            can_load_more=state.can_load_more,
            last_error=state.last_error,
            page_cursor=state.page_cursor,
        )

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def phase(self) -> LoadPhase:
        return phase_of(self.is_loading_initial, self.is_loading_more, self.can_load_more)

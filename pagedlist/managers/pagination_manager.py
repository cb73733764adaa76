"""Pagination state management for infinite scroll."""

import logging
from typing import Optional

from pagedlist.core.errors import CancelledStale, PageLoadError
from pagedlist.core.models import (
    ListSnapshot,
    ListState,
    LoadKind,
    LoadPhase,
    LoadTicket,
    Page,
)

logger = logging.getLogger("PagedList.PaginationManager")


class PaginationManager:
    """Owns a ListState and applies load transitions to it.

    Every fetch is tagged with a LoadTicket. Completions for a ticket that is
    no longer in flight raise CancelledStale and leave the state untouched.
    """

    def __init__(self, stop_on_empty_page: bool = True):
        self.stop_on_empty_page = stop_on_empty_page
        self.state = ListState()

    @property
    def phase(self) -> LoadPhase:
        return self.state.phase

    def can_load_more(self) -> bool:
        state = self.state
        return state.can_load_more and not state.is_loading_initial and not state.is_loading_more

    def snapshot(self) -> ListSnapshot:
        return ListSnapshot.of(self.state)

    def start_initial(self) -> Optional[LoadTicket]:
        state = self.state
        if state.is_loading_initial:
            logger.debug("Initial load already in flight")
            return None

        # A full load supersedes any incremental load still in flight
        state.generation += 1
        state.is_loading_more = False
        state.is_loading_initial = True
        state.last_error = None
        return LoadTicket(LoadKind.INITIAL, state.generation, None)

    def start_more(self) -> Optional[LoadTicket]:
        if not self.can_load_more():
            logger.debug(f"Load more rejected in phase {self.phase.value}")
            return None

        state = self.state
        state.is_loading_more = True
        return LoadTicket(LoadKind.MORE, state.generation, state.page_cursor)

    def finish_loading(self, ticket: LoadTicket, page: Page) -> None:
        self._check_current(ticket)
        state = self.state

        if ticket.kind is LoadKind.INITIAL:
            state.items = page.records
            state.is_loading_initial = False
        else:
            state.items = state.items + page.records
            state.is_loading_more = False

        state.page_cursor = page.next_cursor
        state.can_load_more = not self._is_exhausted(page)
        state.last_error = None

    def fail_loading(self, ticket: LoadTicket, error: PageLoadError) -> None:
        self.abandon(ticket)
        self.state.last_error = error

    def abandon(self, ticket: LoadTicket) -> None:
        """Clear the loading flag for ``ticket`` without touching the data."""
        self._check_current(ticket)
        if ticket.kind is LoadKind.INITIAL:
            self.state.is_loading_initial = False
        else:
            self.state.is_loading_more = False

    def reset(self) -> None:
        generation = self.state.generation + 1
        self.state = ListState(generation=generation)

    def _is_exhausted(self, page: Page) -> bool:
        if page.is_last:
            return True
        return self.stop_on_empty_page and not page.records

    def _check_current(self, ticket: LoadTicket) -> None:
        state = self.state
        if ticket.generation != state.generation:
            raise CancelledStale(ticket.generation, state.generation)

        in_flight = (
            state.is_loading_initial
            if ticket.kind is LoadKind.INITIAL
            else state.is_loading_more
        )
        if not in_flight:
            raise CancelledStale(ticket.generation, state.generation)

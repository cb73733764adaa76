"""Manages loading a paginated resource into a single growing list."""

import asyncio
import logging
from typing import Any, Callable, Iterable, List, Optional, Set, Tuple

from pagedlist.core.errors import CancelledStale, DecodeError, PageLoadError
from pagedlist.core.models import ListSnapshot, LoadPhase, LoadTicket, Page
from pagedlist.core.protocols import PageSource, StateObserver
from pagedlist.managers.pagination_manager import PaginationManager
from pagedlist.managers.prefetch_manager import PrefetchPolicy

logger = logging.getLogger("PagedList.ListController")


class PaginatedListController:
    """Loads pages from a PageSource and exposes them as one ordered list.

    All public methods are expected to run on a single event loop. State
    changes happen synchronously around the single await on the page source,
    and every transition is published to observers as a ListSnapshot.
    """

    def __init__(
        self,
        page_source: PageSource,
        prefetch_policy: Optional[PrefetchPolicy] = None,
        pagination_manager: Optional[PaginationManager] = None,
        observers: Optional[Iterable[StateObserver]] = None,
        stop_on_empty_page: bool = True,
    ):
        """Initialize PaginatedListController.

        Args:
            page_source: Collaborator returning one page per fetch_page() call
            prefetch_policy: Look-ahead policy used by notify_visible()
            pagination_manager: State machine holding the list state
            observers: Callbacks receiving a snapshot after each transition
            stop_on_empty_page: Treat a page without records as the last page.
                Ignored when pagination_manager is given
        """
        self.page_source = page_source
        self.prefetch_policy = prefetch_policy or PrefetchPolicy()
        self.pagination_manager = pagination_manager or PaginationManager(stop_on_empty_page)
        self._observers: List[StateObserver] = list(observers or [])
        self._tasks: Set[asyncio.Task] = set()
        self._emitting = False
        self._emit_pending = False

    @property
    def snapshot(self) -> ListSnapshot:
        return self.pagination_manager.snapshot()

    @property
    def items(self) -> Tuple[Any, ...]:
        return self.pagination_manager.state.items

    @property
    def page_cursor(self) -> Optional[Any]:
        return self.pagination_manager.state.page_cursor

    @property
    def phase(self) -> LoadPhase:
        return self.pagination_manager.phase

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register an observer and return a function that removes it."""
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def load_initial(self) -> bool:
        """Load the first page, replacing the current items on success.

        Returns:
            False if an initial load was already in flight, True otherwise
        """
        ticket = self.pagination_manager.start_initial()
        if ticket is None:
            return False

        logger.info(f"Starting initial load (generation {ticket.generation})")
        self._emit()
        await self._fetch(ticket)
        return True

    async def load_more(self) -> bool:
        """Load the page after the current cursor and append it.

        Returns:
            False if the request was rejected by the single-flight or
            exhaustion guard, True otherwise
        """
        ticket = self._begin_more()
        if ticket is None:
            return False

        await self._fetch(ticket)
        return True

    def notify_visible(self, index: int) -> Optional[asyncio.Task]:
        """Report that the row at ``index`` became visible.

        Starts loading the next page when the row falls inside the prefetch
        window. The in-flight slot is claimed before returning, so repeated
        calls made before the fetch resolves are no-ops.

        Returns:
            The task running the fetch, or None if nothing was started
        """
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")

        item_count = len(self.items)
        if not self.prefetch_policy.should_trigger(index, item_count):
            return None

        loop = asyncio.get_running_loop()
        ticket = self._begin_more()
        if ticket is None:
            return None

        logger.debug(f"Row {index} of {item_count} visible, prefetching next page")
        task = loop.create_task(self._fetch(ticket))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def reset(self) -> None:
        """Drop all items and pagination state, discarding in-flight fetches."""
        self.pagination_manager.reset()
        logger.info("List state reset")
        self._emit()

    async def aclose(self) -> None:
        """Cancel prefetch tasks still running."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    def _begin_more(self) -> Optional[LoadTicket]:
        ticket = self.pagination_manager.start_more()
        if ticket is None:
            return None

        logger.info(f"Loading more items after cursor {ticket.cursor!r}")
        self._emit()
        return ticket

    async def _fetch(self, ticket: LoadTicket) -> None:
        try:
            page = await self.page_source.fetch_page(ticket.cursor)
            if not isinstance(page, Page):
                raise DecodeError(f"Page source returned {type(page).__name__}, expected Page")
        except asyncio.CancelledError:
            self._settle(self.pagination_manager.abandon, ticket)
            raise
        except Exception as e:
            error = PageLoadError.wrap(e)
            logger.warning(f"Failed to load {ticket.kind.value} page: {error.message}")
            self._settle(self.pagination_manager.fail_loading, ticket, error)
            return

        if self._settle(self.pagination_manager.finish_loading, ticket, page):
            state = self.pagination_manager.state
            logger.info(
                f"Loaded {len(page.records)} items ({ticket.kind.value}), "
                f"showing {len(state.items)}, has more: {state.can_load_more}"
            )

    def _settle(self, apply: Callable, ticket: LoadTicket, *args) -> bool:
        try:
            apply(ticket, *args)
        except CancelledStale as e:
            logger.debug(f"Discarding {ticket.kind.value} result: {e.message}")
            return False

        self._emit()
        return True

    def _emit(self) -> None:
        # A transition made from inside an observer restarts delivery with the
        # newer snapshot.
        if self._emitting:
            self._emit_pending = True
            return

        self._emitting = True
        try:
            while True:
                self._emit_pending = False
                snapshot = self.snapshot
                for observer in list(self._observers):
                    try:
                        observer(snapshot)
                    except Exception:
                        logger.exception(f"Observer {observer!r} failed")
                    if self._emit_pending:
                        break
                if not self._emit_pending:
                    break
        finally:
            self._emitting = False

"""Dependency injection container."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from pagedlist.config import Settings, SettingsManager, get_settings
from pagedlist.core.protocols import PageSource
from pagedlist.managers import PaginatedListController, PrefetchPolicy
from pagedlist.services import IPCPageSource, InMemoryPageSource, WebSocketPageSource


@dataclass
class AppContainer:
    settings: Settings
    records: Sequence[Any] = ()

    _page_source: Optional[PageSource] = field(
        default=None, init=False, repr=False
    )

    @property
    def page_source(self) -> PageSource:
        if self._page_source is None:
            self._page_source = self._build_page_source()
        return self._page_source

    def create_controller(self, observers=None) -> PaginatedListController:
        pagination = self.settings.pagination
        return PaginatedListController(
            self.page_source,
            prefetch_policy=PrefetchPolicy(pagination.look_ahead),
            observers=observers,
            stop_on_empty_page=pagination.stop_on_empty_page,
        )

    def _build_page_source(self) -> PageSource:
        source = self.settings.source
        page_size = self.settings.pagination.page_size

        if source.transport == "memory":
            return InMemoryPageSource(self.records, page_size=page_size)
        if source.transport == "ipc":
            return IPCPageSource(
                source.resolved_socket_path,
                page_size=page_size,
                resource=source.resource,
                timeout=source.request_timeout,
            )
        return WebSocketPageSource(
            source.uri,
            page_size=page_size,
            resource=source.resource,
            max_size=source.max_size,
            open_timeout=source.open_timeout,
            timeout=source.request_timeout,
        )

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        config_path: Optional[Path] = None,
        records: Sequence[Any] = (),
    ) -> "AppContainer":
        if settings is None:
            manager = SettingsManager(config_path) if config_path is not None else get_settings()
            settings = manager.settings
        return cls(settings=settings, records=records)

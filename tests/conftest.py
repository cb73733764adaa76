"""Pytest configuration and shared fixtures."""

import asyncio
import shutil
import tempfile
from pathlib import Path
from typing import Any, List, Optional

import pytest

from pagedlist.core.models import Page


class ScriptedPageSource:
    """Page source replaying a fixed list of outcomes.

    Each outcome is a Page, an exception to raise, or an asyncio.Future whose
    result (or exception) is used once it resolves.
    """

    def __init__(self, outcomes=()):
        self.outcomes: List[Any] = list(outcomes)
        self.calls: List[Optional[Any]] = []

    def add(self, *outcomes):
        self.outcomes.extend(outcomes)

    async def fetch_page(self, cursor=None):
        self.calls.append(cursor)
        if not self.outcomes:
            raise AssertionError(f"Unexpected fetch at cursor {cursor!r}")

        outcome = self.outcomes.pop(0)
        if isinstance(outcome, asyncio.Future):
            outcome = await outcome
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def make_pages(count: int = 3, size: int = 20) -> List[Page]:
    """Build ``count`` consecutive pages; the last one has no next cursor."""
    pages = []
    for number in range(count):
        records = tuple(f"record-{number * size + i}" for i in range(size))
        next_cursor = number + 1 if number < count - 1 else None
        pages.append(Page(records=records, next_cursor=next_cursor))
    return pages


@pytest.fixture
def pages() -> List[Page]:
    return make_pages()


@pytest.fixture
def page_builder():
    return make_pages


@pytest.fixture
def scripted_source() -> ScriptedPageSource:
    return ScriptedPageSource()


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def socket_path():
    # Short directory keeps the path under the UNIX socket length limit
    directory = tempfile.mkdtemp(prefix="pl-")
    yield str(Path(directory) / "ipc.sock")
    shutil.rmtree(directory, ignore_errors=True)

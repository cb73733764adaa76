"""Tests for view state helpers."""


def test_loading_screen_for_first_load():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.view_state import ContentMode, content_mode

    snapshot = ListSnapshot(is_loading_initial=True)

    assert content_mode(snapshot) is ContentMode.LOADING


def test_refresh_keeps_list_visible():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.view_state import ContentMode, content_mode

    snapshot = ListSnapshot(items=("a",), is_loading_initial=True)

    assert content_mode(snapshot) is ContentMode.LIST


def test_error_screen_only_when_list_is_empty():
    from pagedlist.core.errors import TransportError
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.view_state import ContentMode, content_mode, show_error_banner

    error = TransportError("offline")

    empty = ListSnapshot(last_error=error)
    populated = ListSnapshot(items=("a", "b"), last_error=error)

    assert content_mode(empty) is ContentMode.ERROR
    assert show_error_banner(empty) is False
    assert content_mode(populated) is ContentMode.LIST
    assert show_error_banner(populated) is True


def test_empty_state_when_exhausted_without_records():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.view_state import ContentMode, content_mode

    snapshot = ListSnapshot(can_load_more=False)

    assert content_mode(snapshot) is ContentMode.EMPTY


def test_loading_footer_follows_load_more():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.view_state import show_loading_footer

    assert show_loading_footer(ListSnapshot(items=("a",), is_loading_more=True)) is True
    assert show_loading_footer(ListSnapshot(items=("a",))) is False

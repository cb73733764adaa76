"""Tests for formatting utilities."""


def test_format_count_singular_and_plural():
    from pagedlist.utils.formatting import format_count

    assert format_count(1) == "1 item"
    assert format_count(0) == "0 items"
    assert format_count(40, noun="user") == "40 users"


def test_format_status_while_loading():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.formatting import format_status

    assert format_status(ListSnapshot(is_loading_initial=True)) == "Loading..."


def test_format_status_with_more_pages():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.formatting import format_status

    snapshot = ListSnapshot(items=tuple(range(20)))

    assert format_status(snapshot) == "Showing 20 items"


def test_format_status_at_end_of_list():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.formatting import format_status

    snapshot = ListSnapshot(items=tuple(range(60)), can_load_more=False)

    assert format_status(snapshot) == "Showing 60 items (end of list)"


def test_format_status_refreshing_populated_list():
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.formatting import format_status

    snapshot = ListSnapshot(items=("a",), is_loading_initial=True)

    assert format_status(snapshot) == "Showing 1 item"


def test_format_error():
    from pagedlist.core.errors import DecodeError, TransportError
    from pagedlist.core.models import ListSnapshot
    from pagedlist.utils.formatting import format_error

    assert format_error(ListSnapshot()) == ""
    assert format_error(ListSnapshot(last_error=TransportError("Server down"))) == "Error: Server down"
    assert format_error(ListSnapshot(last_error=DecodeError("x"))) == "Error: Failed to decode the response."

"""Encoding of page requests and decoding of page responses."""

import json
from typing import Any, Dict, Optional, Union

from pagedlist.core.errors import DecodeError, TransportError
from pagedlist.core.models import Page

GET_PAGE_ACTION = "get_page"


def encode_request(
    limit: int,
    cursor: Optional[Any] = None,
    resource: Optional[str] = None,
) -> str:
    request: Dict[str, Any] = {"action": GET_PAGE_ACTION, "limit": limit}
    if cursor is not None:
        request["cursor"] = cursor
    if resource:
        request["resource"] = resource
    return json.dumps(request)


def decode_page(message: Union[str, bytes, dict]) -> Page:
    """Turn a response message into a Page.

    Args:
        message: Raw JSON text or an already parsed dict

    Returns:
        Page: The decoded page

    Raises:
        TransportError: The server answered with an error message
        DecodeError: The message is not a valid page response
    """
    if isinstance(message, dict):
        data = message
    else:
        try:
            data = json.loads(message)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid JSON in page response: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"Page response must be an object, got {type(data).__name__}")

    msg_type = data.get("type")
    if msg_type == "error":
        raise TransportError(data.get("message") or "Server reported an error")
    if msg_type != "page":
        raise DecodeError(f"Unexpected response type: {msg_type!r}")

    items = data.get("items")
    if not isinstance(items, list):
        raise DecodeError("Page response is missing an 'items' list")

    return Page(records=tuple(items), next_cursor=data.get("next_cursor"))

"""Page sources and wire helpers."""

from .ipc_page_source import IPCPageSource
from .memory_page_source import InMemoryPageSource
from .page_codec import decode_page, encode_request
from .websocket_page_source import WebSocketPageSource

__all__ = [
    "IPCPageSource",
    "InMemoryPageSource",
    "WebSocketPageSource",
    "decode_page",
    "encode_request",
]

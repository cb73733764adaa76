"""WebSocket page source."""

import asyncio
import logging
from typing import Any, Callable, Optional

import websockets

from pagedlist.core.errors import TransportError
from pagedlist.core.models import Page
from pagedlist.services.page_codec import decode_page, encode_request

logger = logging.getLogger("PagedList.WebSocketPageSource")


class WebSocketPageSource:
    def __init__(
        self,
        uri: str,
        page_size: int = 20,
        resource: Optional[str] = None,
        max_size: int = 8 * 1024 * 1024,
        open_timeout: float = 5.0,
        timeout: float = 10.0,
        connect: Callable = websockets.connect,
    ):
        self.uri = uri
        self.page_size = page_size
        self.resource = resource
        self.max_size = max_size
        self.open_timeout = open_timeout
        self.timeout = timeout
        self._connect = connect

    async def fetch_page(self, cursor: Optional[Any] = None) -> Page:
        request = encode_request(self.page_size, cursor, self.resource)
        logger.debug(f"Requesting page at cursor {cursor!r} from {self.uri}")

        try:
            response = await asyncio.wait_for(self._exchange(request), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(f"Timed out after {self.timeout}s waiting for {self.uri}") from e
        except websockets.exceptions.ConnectionClosed as e:
            raise TransportError(f"WebSocket connection closed: {e}") from e
        except (websockets.exceptions.WebSocketException, OSError) as e:
            raise TransportError(f"WebSocket request to {self.uri} failed: {e}") from e

        return decode_page(response)

    async def _exchange(self, request: str):
        async with self._connect(
            self.uri, max_size=self.max_size, open_timeout=self.open_timeout
        ) as websocket:
            await websocket.send(request)
            return await websocket.recv()

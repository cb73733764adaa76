"""UNIX domain socket page source."""

import asyncio
import logging
from typing import Any, Optional

from pagedlist.core.errors import DecodeError, TransportError
from pagedlist.core.models import Page
from pagedlist.services.ipc_helpers import connect as ipc_connect, default_socket_path
from pagedlist.services.page_codec import decode_page, encode_request

logger = logging.getLogger("PagedList.IPCPageSource")


class IPCPageSource:
    """Requests pages from a backend listening on a UNIX socket.

    Each fetch opens a connection, sends one ``get_page`` request and reads
    one response.
    """

    def __init__(
        self,
        socket_path: Optional[str] = None,
        page_size: int = 20,
        resource: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self.socket_path = socket_path or default_socket_path()
        self.page_size = page_size
        self.resource = resource
        self.timeout = timeout

    async def fetch_page(self, cursor: Optional[Any] = None) -> Page:
        request = encode_request(self.page_size, cursor, self.resource)
        logger.debug(f"Requesting page at cursor {cursor!r} from {self.socket_path}")

        try:
            response = await asyncio.wait_for(self._exchange(request), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(f"Timed out after {self.timeout}s waiting for {self.socket_path}") from e
        except ValueError as e:
            raise DecodeError(f"Malformed IPC frame: {e}") from e
        except OSError as e:
            raise TransportError(f"IPC connection to {self.socket_path} failed: {e}") from e

        return decode_page(response)

    async def _exchange(self, request: str) -> str:
        async with ipc_connect(self.socket_path) as conn:
            await conn.send(request)
            return await conn.recv()

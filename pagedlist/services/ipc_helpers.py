"""Helper functions for IPC communication via UNIX domain sockets"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

logger = logging.getLogger("PagedList.IPC.Helpers")

DEFAULT_SOCKET_NAME = "pagedlist-ipc.sock"


def default_socket_path() -> str:
    """Get the default UNIX socket path."""
    runtime_dir = os.environ.get("XDG_RUNTIME_DIR", "/tmp")
    return os.path.join(runtime_dir, DEFAULT_SOCKET_NAME)


class ConnectionClosedError(ConnectionError):
    """Raised when connection is closed unexpectedly"""
    pass


class IPCConnection:
    """Context manager for IPC connections using UNIX domain sockets.

    Frames are a decimal length line followed by the UTF-8 message and a
    trailing newline, the length counting the newline.
    """

    def __init__(self, socket_path: str):
        self.socket_path = socket_path
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None

    async def __aenter__(self):
        """Connect to IPC server"""
        self._reader, self._writer = await asyncio.open_unix_connection(self.socket_path)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close IPC connection"""
        if self._writer:
            self._writer.close()
            try:
                await self._writer.wait_closed()
            except ConnectionError as e:
                logger.debug(f"Error while closing IPC connection: {e}")

    async def send(self, message: str):
        """Send a JSON string message"""
        if not self._writer or self._writer.is_closing():
            raise ConnectionClosedError("IPC connection is closed")

        self._writer.write(encode_frame(message))
        await self._writer.drain()

    async def recv(self) -> str:
        """Receive a JSON string message"""
        if not self._reader or self._reader.at_eof():
            raise ConnectionClosedError("IPC connection is closed")

        try:
            length_line = await self._reader.readuntil(b'\n')
            message_length = int(length_line.decode('utf-8').strip())
            message_bytes = await self._reader.readexactly(message_length)
        except asyncio.IncompleteReadError as e:
            raise ConnectionClosedError("IPC connection closed mid-message") from e

        return message_bytes.decode('utf-8').rstrip('\n')


def encode_frame(message: str) -> bytes:
    message_bytes = message.encode('utf-8') + b'\n'
    length_prefix = f"{len(message_bytes)}\n".encode('utf-8')
    return length_prefix + message_bytes


@asynccontextmanager
async def connect(socket_path: str):
    """
    Connect to IPC server via UNIX domain socket

    Args:
        socket_path: Path to UNIX socket

    Yields:
        IPCConnection object with send/recv methods
    """
    conn = IPCConnection(socket_path)
    async with conn as connection:
        yield connection

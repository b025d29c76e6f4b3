"""Endpoint I/O classes: one over a socket and one that does nothing."""

import socket
from typing import Sequence


class SocketEndpoint:
    """Reads and writes through a connected socket."""

    name = "socket"

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock

    def _open_socket(self) -> socket.socket:
        if self.sock.fileno() == -1:
            raise ValueError("endpoint socket is closed")
        return self.sock

    def read(self, size: int) -> bytes:
        """Receive up to ``size`` bytes."""
        return self._open_socket().recv(size)

    def write(self, data) -> int:
        """Send ``data``; return the number of bytes sent."""
        return self._open_socket().send(data)

    def readv(self, buffers: Sequence) -> int:
        """Receive into writable ``buffers`` in order; return bytes received."""
        return self._open_socket().recvmsg_into(buffers)[0]

    def writev(self, buffers: Sequence) -> int:
        """Send ``buffers`` as one gathered write; return bytes sent."""
        return self._open_socket().sendmsg(buffers)

    def close(self) -> None:
        """Close the socket."""
        self._open_socket().close()

    def __enter__(self) -> "SocketEndpoint":
        return self

    def __exit__(self, *exc_info) -> None:
        if self.sock.fileno() != -1:
            self.sock.close()


class NullEndpoint:
    """An endpoint that transfers nothing."""

    name = "qnio"

    def __init__(self) -> None:
        self.closed = False

    def read(self, size: int) -> bytes:
        """Check ``size`` and return no data."""
        if size < 0:
            raise ValueError("read size must not be negative")
        return b""

    def write(self, data) -> int:
        """Check that ``data`` is bytes-like; report zero bytes written."""
        with memoryview(data):
            pass
        return 0

    def close(self) -> None:
        """Mark the endpoint closed; there is nothing else to release."""
        self.closed = True
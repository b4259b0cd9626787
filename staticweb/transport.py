"""Socket handling: listening, receiving requests and sending responses."""

from __future__ import annotations

import logging
import os
import socket
from functools import partial

logger = logging.getLogger(__name__)

_CHUNK = 1024
_BACKLOG = 1024
_TERMINATOR = b"\r\n\r\n"


class Listener:
    """A TCP socket listening on every interface at the given port."""

    def __init__(self, port: int) -> None:
        logger.info("creating socket")
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            logger.info("binding port %d", port)
            sock.bind(("", port))
            logger.info("listening")
            sock.listen(_BACKLOG)
        except OSError:
            sock.close()
            raise
        self._sock = sock
        self.port: int = sock.getsockname()[1]

    def accept(self) -> socket.socket:
        """Wait for a client and return the connected socket."""
        logger.info("waiting for a client")
        conn, (host, port) = self._sock.accept()
        logger.info("accepted connection from %s.%d", host, port)
        return conn

    def close(self) -> None:
        """Stop listening; a blocked accept fails with OSError."""
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._sock.close()

    def __enter__(self) -> Listener:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def recv_request(conn: socket.socket) -> str | None:
    """Read from conn until a blank line ends the head or the peer closes.

    Returns the text received, or None if the peer closed before sending
    anything.
    """
    data = bytearray()
    while True:
        chunk = conn.recv(_CHUNK - 1)
        if not chunk:
            logger.info("client closed the connection")
            break
        data += chunk
        if _TERMINATOR in data:
            break
    if not data:
        return None
    return data.decode("latin-1")


def send_head(conn: socket.socket, head: str) -> None:
    """Send a response head."""
    conn.sendall(head.encode("latin-1"))


def send_body(conn: socket.socket, path: str | os.PathLike[str]) -> None:
    """Send the contents of the file at path."""
    with open(path, "rb") as source:
        for chunk in iter(partial(source.read, _CHUNK), b""):
            conn.sendall(chunk)
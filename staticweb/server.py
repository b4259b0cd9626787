"""The listening server that hands each client to its own thread."""

from __future__ import annotations

import logging
import os
import threading

from staticweb.client import serve_client
from staticweb.signals import ignore_signals
from staticweb.transport import Listener

logger = logging.getLogger(__name__)


class Server:
    """A static file server listening on a TCP port."""

    def __init__(self, port: int) -> None:
        ignore_signals()
        self._listener = Listener(port)
        self.port: int = self._listener.port
        self._closed = False

    def run(self, home: str | os.PathLike[str]) -> None:
        """Accept clients until closed, serving files found under home.

        Returns once close() has been called; raises OSError if accepting
        fails for any other reason.
        """
        while True:
            try:
                conn = self._listener.accept()
            except OSError:
                if self._closed:
                    return
                raise
            worker = threading.Thread(
                target=serve_client, args=(conn, home), daemon=True
            )
            worker.start()

    def close(self) -> None:
        """Stop listening."""
        self._closed = True
        self._listener.close()

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
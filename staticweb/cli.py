"""Command line entry point: staticweb [PORT [HOME]]."""

from __future__ import annotations

import logging
import re
import sys

from staticweb.server import Server

logger = logging.getLogger(__name__)

DEFAULT_PORT = 80
DEFAULT_HOME = "../home"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Serve files from HOME on PORT until interrupted; return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    port = _atoi(args[0]) & 0xFFFF if args else DEFAULT_PORT
    home = args[1] if len(args) > 1 else DEFAULT_HOME
    logging.basicConfig(
        level=logging.INFO, format="%(process)d.%(thread)d > %(message)s"
    )
    try:
        with Server(port) as server:
            server.run(home)
    except OSError as exc:
        logger.error("server failed: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Setting the process to ignore most signals."""

from __future__ import annotations

import logging
import signal

logger = logging.getLogger(__name__)

_KEPT = {signal.SIGINT, signal.SIGTERM}


def ignore_signals() -> list[int]:
    """Ignore every signal except SIGINT and SIGTERM.

    Signals that cannot be caught or do not exist are passed over.
    Returns the numbers of the signals now ignored. Must be called from
    the main thread.
    """
    logger.info("ignoring most signals")
    first = int(getattr(signal, "SIGHUP", 1))
    last = int(getattr(signal, "SIGRTMAX", max(signal.valid_signals())))
    ignored: list[int] = []
    for signum in range(first, last + 1):
        if signum in _KEPT:
            continue
        try:
            signal.signal(signum, signal.SIG_IGN)
        except (OSError, ValueError):
            continue
        ignored.append(signum)
    return ignored
"""
User-visible diagnostics for pkgid.

The core reports hints (such as "did you mean ...") through a single
error sink. By default the sink prints to the Rich console; applications
embedding pkgid can install their own sink to collect or reformat
messages.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Iterator

from pkgid.utils.console import print_error
from pkgid.utils.logger import get_logger

logger = get_logger("messages")

#: Callable receiving one fully formatted diagnostic message.
ErrorSink = Callable[[str], None]

_sink: ErrorSink = print_error
_sink_lock = threading.Lock()


def error(message: str) -> None:
    """Emit ``message`` through the current error sink."""
    logger.debug("Emitting diagnostic: %s", message)
    _sink(message)


def get_error_sink() -> ErrorSink:
    """Return the currently installed error sink."""
    return _sink


def set_error_sink(sink: ErrorSink) -> ErrorSink:
    """Install ``sink`` as the process-wide error sink.

    Returns:
        The previously installed sink, so callers can restore it.
    """
    global _sink

    with _sink_lock:
        previous = _sink
        _sink = sink
    return previous


@contextmanager
def error_sink(sink: ErrorSink) -> Iterator[ErrorSink]:
    """Temporarily install ``sink`` for the duration of a ``with`` block.

    Example::

        >>> collected = []
        >>> with error_sink(collected.append):
        ...     error("oops")
        >>> collected
        ['oops']
    """
    previous = set_error_sink(sink)
    try:
        yield sink
    finally:
        set_error_sink(previous)

"""
Streaming hash helper.

Hash tags are used as cache keys for installed artifacts, so the digest
must be stable across runs and interpreter processes. ``hash()`` on
strings is salted per process and cannot be used; a ``hashlib`` engine
is used instead.
"""

from __future__ import annotations

import hashlib
from typing import Union

from pkgid.constants import DEFAULT_HASH_ALGORITHM


class StreamingHasher:
    """Incremental hash engine producing a hex digest.

    Args:
        algorithm: Any algorithm name accepted by :func:`hashlib.new`.

    Example::

        >>> hasher = StreamingHasher()
        >>> hasher.write("github.com/a/b")
        >>> hasher.write("0.1")
        >>> len(hasher.hexdigest())
        64
    """

    __slots__ = ("_engine",)

    def __init__(self, algorithm: str = DEFAULT_HASH_ALGORITHM) -> None:
        self._engine = hashlib.new(algorithm)

    @property
    def algorithm(self) -> str:
        return self._engine.name

    def write(self, data: Union[str, bytes]) -> None:
        """Feed ``data`` into the engine; strings are encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._engine.update(data)

    def hexdigest(self) -> str:
        """Return the hex digest of everything written so far."""
        return self._engine.hexdigest()


def hash_string(data: str, *, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """Hash ``data`` with a fresh engine and return its hex digest."""
    hasher = StreamingHasher(algorithm)
    hasher.write(data)
    return hasher.hexdigest()

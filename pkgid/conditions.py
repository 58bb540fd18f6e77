"""
Recoverable conditions.

A condition is an error that a caller may choose to recover from without
unwinding the operation that signalled it. The caller installs a handler
around the operation::

    def substitute(path, reason):
        return PkgId.new("fallback")

    with bad_pkg_id.trap(substitute):
        pkg = PkgId.new("/abs/path")   # returns the substitute

When no handler is installed, signalling the condition raises its error
type instead. Handlers are stored in a :class:`~contextvars.ContextVar`,
so they are scoped to the current thread or task.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import PurePosixPath
from typing import Any, Callable, Generic, Iterator, Tuple, Type, TypeVar

from pkgid.exceptions import BadPkgIdError
from pkgid.utils.logger import get_logger

logger = get_logger("conditions")

T = TypeVar("T")

#: Handler signature: ``handler(path, reason) -> replacement``.
Handler = Callable[[PurePosixPath, str], Any]


class Condition(Generic[T]):
    """A named condition with a stack of caller-installed handlers.

    Args:
        name: Condition name, used in log messages.
        error_type: Exception raised when no handler is installed. It is
            constructed with ``(path, reason)``.
    """

    def __init__(self, name: str, error_type: Type[Exception]) -> None:
        self.name = name
        self.error_type = error_type
        self._handlers: ContextVar[Tuple[Handler, ...]] = ContextVar(
            f"{name}_handlers", default=()
        )

    @contextmanager
    def trap(self, handler: Callable[[PurePosixPath, str], T]) -> Iterator[None]:
        """Install ``handler`` for the duration of a ``with`` block.

        Nested traps shadow outer ones; the innermost handler runs.
        """
        token = self._handlers.set(self._handlers.get() + (handler,))
        try:
            yield
        finally:
            self._handlers.reset(token)

    def is_trapped(self) -> bool:
        """Return True if a handler is installed in the current context."""
        return bool(self._handlers.get())

    def signal(self, path: PurePosixPath, reason: str) -> T:
        """Signal the condition.

        Returns:
            Whatever the innermost handler returns.

        Raises:
            The condition's ``error_type`` when no handler is installed, or
            whatever the handler raises.
        """
        handlers = self._handlers.get()
        if not handlers:
            raise self.error_type(path, reason)

        logger.debug("Condition %s trapped for %s: %s", self.name, path, reason)

        # The handler runs under the outer handlers only
        token = self._handlers.set(handlers[:-1])
        try:
            return handlers[-1](path, reason)
        finally:
            self._handlers.reset(token)


#: Signalled by the identifier constructor for absolute or empty paths.
bad_pkg_id: Condition[Any] = Condition("bad_pkg_id", BadPkgIdError)

"""
Custom exception hierarchy for pkgid.

This module defines structured exception types used across pkgid.
All exceptions inherit from :class:`PkgIdError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class PkgIdError(Exception):
    """Base exception for all pkgid errors.

    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class IllegalPackageIdError(PkgIdError):
    """Raised when a string contains characters not allowed in a package ID.

    Args:
        package_id: The rejected input string.
        suggestion: Identifier suggested by the URL heuristic, if any.
    """

    __slots__ = ("package_id", "suggestion")

    def __init__(
        self,
        package_id: str,
        *,
        suggestion: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "suggestion", suggestion)

        super().__init__(f"Can't parse {package_id} as a package ID", details)

        self.package_id = package_id
        self.suggestion = suggestion


class BadPkgIdError(PkgIdError):
    """Raised when the ``bad_pkg_id`` condition is signalled with no handler.

    Args:
        path: The offending path.
        reason: Short reason, e.g. ``"absolute pkgid"``.
    """

    __slots__ = ("path", "reason")

    def __init__(self, path: Any, reason: str) -> None:
        super().__init__(f"Bad package ID {str(path)!r}: {reason}")

        self.path = path
        self.reason = reason


class PathDerivationError(PkgIdError):
    """Raised when a path has a final component but no stem can be derived.

    Args:
        package_id: The string the path was built from.
    """

    __slots__ = ("package_id",)

    def __init__(self, package_id: str) -> None:
        super().__init__(f"Strange path! {package_id}")

        self.package_id = package_id


class ConfigError(PkgIdError):
    """Raised when a configuration file cannot be loaded or is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option

"""
Utility helpers for pkgid.

This package provides reusable utilities used across pkgid, including:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- The streaming hash helper behind hash tags
- Version tag parsing helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from pkgid.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from pkgid.utils.console import (
    get_raw_console,
    print_error,
    print_pairs,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Hashing utilities
# ---------------------------------------------------------------------------

from pkgid.utils.hashing import StreamingHasher, hash_string

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from pkgid.utils.version_utils import latest_version_tag, try_parsing_version

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "print_error",
    "print_pairs",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    # Hashing
    "StreamingHasher",
    "hash_string",
    # Version utilities
    "latest_version_tag",
    "try_parsing_version",
]

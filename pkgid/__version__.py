"""
pkgid version information.

This module provides a single source of truth for the package version,
read by the CLI and by the build backend.
"""

from __future__ import annotations

__version__ = "0.1.0.dev0"

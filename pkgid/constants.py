"""
Centralized constants for pkgid.

This module defines immutable configuration values used across pkgid,
including identifier syntax, version probing settings, configuration
discovery names, and logging formats. All values are intended to be
treated as read-only.
"""

from typing import Final, FrozenSet, Sequence

# ---------------------------------------------------------------------------
# Identifier syntax
# ---------------------------------------------------------------------------

#: Punctuation allowed in identifier segments besides ASCII alphanumerics.
IDENTIFIER_PUNCTUATION: Final[FrozenSet[str]] = frozenset("-_./")

#: Separator between path components.
PATH_SEPARATOR: Final[str] = "/"

#: Separator between the path part and an explicit version tag.
VERSION_SEPARATOR: Final[str] = "#"

#: Separator between a URL scheme and the rest of the URL.
URL_SCHEME_SEPARATOR: Final[str] = "://"

#: Reason attached to ``bad_pkg_id`` for absolute paths.
REASON_ABSOLUTE: Final[str] = "absolute pkgid"

#: Reason attached to ``bad_pkg_id`` for paths with no final component.
REASON_ZERO_LENGTH: Final[str] = "0-length pkgid"

#: Reason attached to ``bad_pkg_id`` for paths that climb above their root.
REASON_PARENT_REFERENCE: Final[str] = "pkgid refers to a parent directory"

#: Parent directory component.
PARENT_DIR: Final[str] = ".."

# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------

#: Algorithm used by the streaming hash helper for hash tags.
DEFAULT_HASH_ALGORITHM: Final[str] = "sha256"

# ---------------------------------------------------------------------------
# Version probing
# ---------------------------------------------------------------------------

#: Environment variable holding extra package search roots.
SEARCH_PATH_ENV: Final[str] = "PKGID_PATH"

#: Git executable used for local and remote tag discovery.
GIT_EXECUTABLE: Final[str] = "git"

#: Default timeout in seconds for remote tag discovery.
DEFAULT_GIT_TIMEOUT: Final[int] = 30

#: Default scheme used to reach a remote origin inferred from a path.
DEFAULT_REMOTE_SCHEME: Final[str] = "https"

#: Schemes accepted for remote probing.
SUPPORTED_REMOTE_SCHEMES: Final[Sequence[str]] = ("https", "http", "ssh", "git")

#: Ref prefix of tags in ``git ls-remote`` output.
TAG_REF_PREFIX: Final[str] = "refs/tags/"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Environment variable pointing to an explicit configuration file.
CONFIG_ENV: Final[str] = "PKGID_CONFIG"

#: Dedicated configuration file name.
CONFIG_FILE_NAME: Final[str] = "pkgid.toml"

#: Default for probing local workspaces for versions.
DEFAULT_PROBE_LOCAL: Final[bool] = True

#: Default for probing remote origins for versions.
DEFAULT_PROBE_REMOTE: Final[bool] = True

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

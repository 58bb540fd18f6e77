"""Configuration file loader for pkgid.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``pkgid.toml`` — settings under ``[pkgid]`` table
- ``pyproject.toml`` — settings under ``[tool.pkgid]`` table

Discovery order:

1. Explicit path from ``--config`` or ``PKGID_CONFIG``
2. ``pkgid.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.pkgid]`` section

The settings only affect version discovery; parsing itself is not
configurable.

Example (``pkgid.toml``)::

    [pkgid]
    search_path = ["~/src", "/opt/workspaces"]
    probe_remote = false
    git_timeout = 10
"""

from __future__ import annotations

import os
import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from pkgid.exceptions import ConfigError
from pkgid.utils.logger import get_logger
from pkgid.constants import (
    CONFIG_ENV,
    CONFIG_FILE_NAME,
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_PROBE_LOCAL,
    DEFAULT_PROBE_REMOTE,
    DEFAULT_REMOTE_SCHEME,
    SUPPORTED_REMOTE_SCHEMES,
)

logger = get_logger("config")


@dataclass
class PkgIdConfig:
    """Parsed and validated pkgid configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        search_path: Extra package search roots, probed for local versions
            after the ``PKGID_PATH`` entries.
        probe_local: Look for version tags in local workspaces.
        probe_remote: Ask the remote origin for version tags.
        remote_scheme: URL scheme used to reach a remote origin.
        git_timeout: Seconds to wait for a remote probe.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    search_path: List[Path] = field(default_factory=list)
    probe_local: bool = DEFAULT_PROBE_LOCAL
    probe_remote: bool = DEFAULT_PROBE_REMOTE
    remote_scheme: str = DEFAULT_REMOTE_SCHEME
    git_timeout: int = DEFAULT_GIT_TIMEOUT

    source_path: Optional[Path] = field(default=None, repr=False, compare=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "search_path": [str(p) for p in self.search_path],
            "probe_local": self.probe_local,
            "probe_remote": self.probe_remote,
            "remote_scheme": self.remote_scheme,
            "git_timeout": self.git_timeout,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Search order:

    1. ``explicit_path``, or the ``PKGID_CONFIG`` environment variable
    2. ``pkgid.toml`` in current directory
    3. ``pyproject.toml`` with ``[tool.pkgid]`` section in current directory

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is None and os.environ.get(CONFIG_ENV):
        explicit_path = Path(os.environ[CONFIG_ENV])

    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    pkgid_toml = cwd / CONFIG_FILE_NAME
    if pkgid_toml.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, pkgid_toml)
        return pkgid_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_pkgid_section(pyproject_toml):
        logger.debug("Found [tool.pkgid] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_pkgid_section(path: Path) -> bool:
    """Check if pyproject.toml contains a [tool.pkgid] section.

    A pyproject.toml that cannot be read is simply not ours to load, so
    read and parse errors count as "no section".
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and "pkgid" in tool


def load_config(config_path: Optional[Path] = None) -> PkgIdConfig:
    """Load and validate pkgid configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`PkgIdConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return PkgIdConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("pkgid", {})
    else:
        section = raw.get("pkgid", {})

    if not section:
        logger.debug("Config file found but no pkgid section, using defaults")
        return PkgIdConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _require_bool(section: Dict[str, Any], key: str, config_path: str) -> bool:
    val = section[key]
    if not isinstance(val, bool):
        raise ConfigError(
            f"{key} must be a boolean, got {type(val).__name__}",
            config_path=config_path,
            option=key,
        )
    return val


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> PkgIdConfig:
    """Parse and validate the ``[pkgid]`` or ``[tool.pkgid]`` table.

    Rejects unknown keys and type mismatches.

    Raises:
        ConfigError: Unknown keys or incorrect types.
    """
    config = PkgIdConfig()

    known_top = {
        "search_path",
        "probe_local",
        "probe_remote",
        "remote_scheme",
        "git_timeout",
    }

    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "search_path" in section:
        val = section["search_path"]
        if not isinstance(val, list) or not all(isinstance(p, str) for p in val):
            raise ConfigError(
                "search_path must be a list of strings",
                config_path=config_path,
                option="search_path",
            )
        config.search_path = [Path(p).expanduser() for p in val]

    if "probe_local" in section:
        config.probe_local = _require_bool(section, "probe_local", config_path)

    if "probe_remote" in section:
        config.probe_remote = _require_bool(section, "probe_remote", config_path)

    if "remote_scheme" in section:
        val = section["remote_scheme"]
        if val not in SUPPORTED_REMOTE_SCHEMES:
            raise ConfigError(
                f"remote_scheme must be one of {', '.join(SUPPORTED_REMOTE_SCHEMES)}, "
                f"got {val!r}",
                config_path=config_path,
                option="remote_scheme",
            )
        config.remote_scheme = val

    if "git_timeout" in section:
        val = section["git_timeout"]
        # bool is an int subclass
        if isinstance(val, bool) or not isinstance(val, int) or val <= 0:
            raise ConfigError(
                f"git_timeout must be a positive integer, got {val!r}",
                config_path=config_path,
                option="git_timeout",
            )
        config.git_timeout = val

    return config

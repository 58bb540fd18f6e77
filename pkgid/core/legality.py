"""
Syntactic validation of package identifiers.

An identifier is a ``/``-separated path of segments made of ASCII
alphanumerics, ``-``, ``_``, ``.`` and non-ASCII identifier characters,
optionally followed by ``#`` and a free-form version tag.

Users often paste a clone URL instead of an identifier. When a string is
rejected, :func:`drop_url_scheme` guesses the identifier they meant so the
diagnostic can suggest it. It is a heuristic, not a URL parser.
"""

from __future__ import annotations

from typing import Optional

from pkgid.constants import (
    IDENTIFIER_PUNCTUATION,
    PATH_SEPARATOR,
    URL_SCHEME_SEPARATOR,
    VERSION_SEPARATOR,
)
from pkgid.exceptions import IllegalPackageIdError
from pkgid.messages import error
from pkgid.utils.logger import get_logger

logger = get_logger("core.legality")


def is_url_part(ch: str) -> bool:
    """Return True if the character ``ch`` may appear in an identifier segment.

    ``/`` is accepted so whole paths can be scanned character by character.

    Examples:
        >>> is_url_part("a"), is_url_part("/"), is_url_part("é")
        (True, True, True)
        >>> is_url_part(":")
        False
    """
    if ch.isascii():
        return ch.isalnum() or ch in IDENTIFIER_PUNCTUATION
    # XID_Start, then XID_Continue
    return ch.isidentifier() or f"_{ch}".isidentifier()


def _is_clean(s: str) -> bool:
    return all(is_url_part(ch) for ch in s)


def _strip_extension(location: str) -> str:
    """Drop the extension of the last path component (``y.tar.gz`` -> ``y``)."""
    head, sep, last = location.rpartition(PATH_SEPARATOR)
    stem = last.split(".", 1)[0]
    if not stem:
        return location
    return f"{head}{sep}{stem}"


def drop_url_scheme(s: str) -> Optional[str]:
    """Guess the identifier meant by a URL-looking string.

    Args:
        s: Any string, typically one rejected by the legality check.

    Returns:
        The text after the first ``://`` with its file extension removed,
        or ``None`` if ``s`` has no ``://``, contains characters an
        identifier could not contain or leaves no final component.

    Examples:
        >>> drop_url_scheme("https://github.com/x/y.git")
        'github.com/x/y'
        >>> drop_url_scheme("github.com/x/y") is None
        True
    """
    segments = s.split(URL_SCHEME_SEPARATOR)
    if len(segments) < 2:
        return None

    for segment in segments:
        logger.debug("Scanning %s", segment)
        if not _is_clean(segment):
            return None

    candidate = _strip_extension(segments[1])
    # Must itself name a final component
    if not candidate or candidate.endswith(PATH_SEPARATOR):
        return None
    return candidate


def ensure_legal_package_id(s: str) -> None:
    """Check that ``s`` is syntactically a package identifier.

    Characters after the first ``#`` belong to the version tag and are not
    checked. If ``s`` looks like a URL, a suggestion is emitted through the
    error sink before failing.

    Raises:
        IllegalPackageIdError: ``s`` contains an illegal character.
    """
    path_part = s.split(VERSION_SEPARATOR, 1)[0]
    if _is_clean(path_part):
        return

    suggestion = drop_url_scheme(s)
    logger.debug("is %s a URL? %s", s, suggestion is not None)

    if suggestion is not None:
        error(
            "pkgid operates on package identifiers; "
            f"did you mean `{suggestion}` instead of `{s}`?"
        )

    raise IllegalPackageIdError(s, suggestion=suggestion)

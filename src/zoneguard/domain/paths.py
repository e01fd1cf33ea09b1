"""
Path normalization and ancestor tests.

Every path the engine compares goes through ``normalize`` first, so all
comparisons happen on one canonical form: forward slashes, no repeated
separators, no ``.`` or ``..`` segments. Nothing here touches the filesystem.
"""

import posixpath
import re

SEPARATOR = "/"

_DRIVE_RE = re.compile(r"^[A-Za-z]:/")
_REPEATED_SEPARATORS_RE = re.compile(r"/{2,}")


def to_posix(path: str) -> str:
    """Convert backslashes to forward slashes and collapse repeated separators."""
    return _REPEATED_SEPARATORS_RE.sub(SEPARATOR, path.replace("\\", SEPARATOR))


def is_absolute(path: str) -> bool:
    """True for rooted paths (``/src``) and drive paths (``C:/src``)."""
    posix = to_posix(path)
    return posix.startswith(SEPARATOR) or bool(_DRIVE_RE.match(posix))


def normalize(base_path: str, relative_or_absolute: str) -> str:
    """
    Join a pattern or import specifier onto a base path and canonicalize it.

    Absolute inputs ignore ``base_path``. The result never ends with a
    separator unless it is the filesystem root.

    Args:
        base_path: Absolute directory the input is relative to
        relative_or_absolute: Configured pattern, file path or specifier

    Returns:
        Canonical absolute path string
    """
    target = to_posix(relative_or_absolute)
    if not is_absolute(target):
        target = posixpath.join(to_posix(base_path), target)
    drive = ""
    if _DRIVE_RE.match(target):
        # Clamp ".." at the drive root as normpath does at "/"
        drive, target = target[:2], target[2:]
    return drive + posixpath.normpath(target)


def is_ancestor_or_self(candidate_root: str, target: str) -> bool:
    """
    True iff ``target`` equals ``candidate_root`` or is nested under it.

    The match is separator-aware: ``/src/com`` is not an ancestor of
    ``/src/common/x``.
    """
    if target == candidate_root:
        return True
    prefix = candidate_root.rstrip(SEPARATOR) + SEPARATOR
    return target.startswith(prefix)


def basename(path: str) -> str:
    return posixpath.basename(to_posix(path))


def dirname(path: str) -> str:
    return posixpath.dirname(to_posix(path))


def relative_to(base_path: str, path: str) -> str:
    """Display form of ``path`` relative to ``base_path`` (unchanged when outside it)."""
    if not is_ancestor_or_self(base_path, path):
        return path
    if path == base_path:
        return "."
    return path[len(base_path.rstrip(SEPARATOR)) + 1 :]

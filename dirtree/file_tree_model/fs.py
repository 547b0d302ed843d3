"""Filesystem probes used by the tree walker.

Every probe hands back its own outcome (value plus ``OSError | None``) so
callers inspect failures immediately. Failures during traversal are never
fatal; only :func:`validate_root` raises.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import ChildCounts, DirectoryChild

logger = logging.getLogger(__name__)


class InvalidRootError(ValueError):
    """Raised when the traversal root is missing or not a directory."""


def validate_root(raw_path: str) -> Path:
    """Return ``raw_path`` as a ``Path`` after checking it is an existing directory."""
    path = Path(raw_path)
    if not os.path.exists(path):
        raise InvalidRootError(f"cannot access '{raw_path}': No such directory")
    if not os.path.isdir(path):
        raise InvalidRootError(f"{raw_path}: Not a directory")
    return path


def _is_dir(entry: os.DirEntry) -> bool:
    """Return whether ``entry`` is a directory, following symlinks."""
    try:
        return entry.is_dir()
    except OSError as exc:
        logger.debug("is_dir probe failed for %s: %s", entry.path, exc)
        return False


def _is_symlink(entry: os.DirEntry) -> bool:
    try:
        return entry.is_symlink()
    except OSError as exc:
        logger.debug("is_symlink probe failed for %s: %s", entry.path, exc)
        return False


def count_children(directory: Path) -> tuple[ChildCounts, OSError | None]:
    """Count immediate directory and non-directory children of ``directory``.

    Symlinks land in the bucket of their target. A child whose kind cannot be
    probed counts as a file. When the listing itself fails the counts are
    zero and the error is returned alongside.
    """
    directories = 0
    files = 0
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if _is_dir(entry):
                    directories += 1
                else:
                    files += 1
    except OSError as exc:
        logger.debug("cannot count children of %s: %s", directory, exc)
        return ChildCounts(), exc
    return ChildCounts(directories=directories, files=files), None


def resolve_link_target(path: Path) -> tuple[str, OSError | None]:
    """Return the canonical target of symlink ``path`` or ``""`` when unresolvable."""
    try:
        return str(path.resolve(strict=True)), None
    except OSError as exc:
        logger.debug("cannot resolve link %s: %s", path, exc)
        return "", exc
    except RuntimeError as exc:
        # Symlink loops raise RuntimeError before Python 3.13.
        logger.debug("cannot resolve link %s: %s", path, exc)
        return "", OSError(str(exc))


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
    """List ``directory`` in native listing order.

    The listing handle is closed before returning, so callers can recurse
    without holding it open. Returns ``(children, scan_error)``.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                child_path = Path(entry.path)
                is_symlink = _is_symlink(entry)
                link_target = ""
                if is_symlink:
                    link_target, _link_error = resolve_link_target(child_path)
                children.append(
                    DirectoryChild(
                        name=entry.name,
                        path=child_path,
                        is_dir=_is_dir(entry),
                        is_symlink=is_symlink,
                        link_target=link_target,
                    )
                )
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return [], exc
    return children, None


def probe_listing_access(directory: Path) -> OSError | None:
    """Open and immediately close a listing of ``directory``; return the failure if any."""
    try:
        with os.scandir(directory):
            pass
    except OSError as exc:
        logger.debug("listing probe failed for %s: %s", directory, exc)
        return exc
    return None


def is_access_denied(error: OSError | None) -> bool:
    return isinstance(error, PermissionError)


__all__ = [
    "InvalidRootError",
    "validate_root",
    "count_children",
    "resolve_link_target",
    "list_directory_children",
    "probe_listing_access",
    "is_access_denied",
]

"""Domain datatypes for directory-tree traversal.

Covers per-entry metadata observed during a listing, per-directory child
counts, the running totals accumulator, and the entry-kind variant that
drives row rendering.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class EntryKind(enum.Enum):
    """Rendering variant for one directory child."""

    SYMLINK_DIRECTORY = "symlink_directory"
    SYMLINK_FILE = "symlink_file"
    DIRECTORY_DENIED = "directory_denied"
    DIRECTORY = "directory"
    FILE = "file"


def classify_entry(is_dir: bool, is_symlink: bool, access_denied: bool = False) -> EntryKind:
    """Map probe answers for one child onto its rendering variant.

    Symlinks win over everything else and are split by their target kind.
    ``access_denied`` only matters for plain directories.
    """
    if is_symlink:
        return EntryKind.SYMLINK_DIRECTORY if is_dir else EntryKind.SYMLINK_FILE
    if is_dir:
        return EntryKind.DIRECTORY_DENIED if access_denied else EntryKind.DIRECTORY
    return EntryKind.FILE


@dataclass(frozen=True)
class DirectoryChild:
    """One listed child plus the probe answers needed to render it."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool = False
    link_target: str = ""


@dataclass(frozen=True)
class ChildCounts:
    """Immediate directory/file child counts of one directory."""

    directories: int = 0
    files: int = 0

    @property
    def total(self) -> int:
        return self.directories + self.files


@dataclass
class TreeTotals:
    """Running directory/file totals for one traversal."""

    directories: int = 0
    files: int = 0

    def add(self, counts: ChildCounts) -> None:
        self.directories += counts.directories
        self.files += counts.files


__all__ = [
    "EntryKind",
    "classify_entry",
    "DirectoryChild",
    "ChildCounts",
    "TreeTotals",
]

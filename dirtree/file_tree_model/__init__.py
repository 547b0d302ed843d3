"""Domain model and filesystem probes for directory trees.

This package contains the non-UI tree primitives:
- entry/count/total datatypes and the entry-kind variant
- filesystem probes that report their own failures
"""

from __future__ import annotations

from .types import ChildCounts, DirectoryChild, EntryKind, TreeTotals, classify_entry
from .fs import (
    InvalidRootError,
    count_children,
    is_access_denied,
    list_directory_children,
    probe_listing_access,
    resolve_link_target,
    validate_root,
)

__all__ = [
    "ChildCounts",
    "DirectoryChild",
    "EntryKind",
    "TreeTotals",
    "classify_entry",
    "InvalidRootError",
    "count_children",
    "is_access_denied",
    "list_directory_children",
    "probe_listing_access",
    "resolve_link_target",
    "validate_root",
]

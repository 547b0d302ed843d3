"""Depth-first directory traversal that emits rendered tree rows.

Each visited directory first adds its immediate child counts to the running
totals, then renders its children in native listing order and descends into
plain, accessible directories while the depth bound allows. Directories at
the depth bound are rendered and counted but not expanded. Symlinks are
always leaves.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .file_tree_model.fs import count_children, is_access_denied, list_directory_children, probe_listing_access
from .file_tree_model.types import TreeTotals, classify_entry
from .render import continuation_glyph, format_entry_row
from .ui_theme import TreeTheme


def _walk_directory(
    directory: Path,
    level: int,
    prefix: tuple[str, ...],
    max_depth: int,
    totals: TreeTotals,
    emit: Callable[[str], None],
    theme: TreeTheme | None,
) -> None:
    counts, _count_error = count_children(directory)
    totals.add(counts)

    children, _scan_error = list_directory_children(directory)
    for position, child in enumerate(children, start=1):
        last = position == counts.total
        plain_dir = child.is_dir and not child.is_symlink

        access_denied = False
        if plain_dir:
            access_denied = is_access_denied(probe_listing_access(child.path))

        kind = classify_entry(
            child.is_dir,
            child.is_symlink,
            access_denied=access_denied and level != max_depth,
        )
        emit(format_entry_row(prefix, last, child.name, kind, child.link_target, theme))

        if not plain_dir:
            continue
        if not access_denied and level < max_depth:
            _walk_directory(
                child.path,
                level + 1,
                prefix + (continuation_glyph(last),),
                max_depth,
                totals,
                emit,
                theme,
            )
        else:
            # Counted but not expanded; a denied listing counts as empty.
            boundary_counts, _boundary_error = count_children(child.path)
            totals.add(boundary_counts)


def walk_tree(
    root: Path,
    max_depth: int,
    emit: Callable[[str], None],
    theme: TreeTheme | None = None,
) -> TreeTotals:
    """Render the tree under ``root`` through ``emit`` and return the totals.

    ``max_depth`` below 1 is clamped to 1; the root's direct children are
    level 1. ``emit`` receives each row without a trailing newline.
    """
    totals = TreeTotals()
    _walk_directory(root, 1, (), max(1, max_depth), totals, emit, theme)
    return totals


__all__ = ["walk_tree"]

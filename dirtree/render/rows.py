"""Formatting helpers for tree rows and the closing summary line."""

from __future__ import annotations

from collections.abc import Sequence

from ..file_tree_model.types import EntryKind, TreeTotals
from ..ui_theme import DEFAULT_THEME, TreeTheme

BRANCH_GLYPH = "├──"
LAST_BRANCH_GLYPH = "└──"
CONTINUATION_GLYPH = "│   "
LAST_CONTINUATION_GLYPH = "    "
ACCESS_DENIED_LABEL = "access denied"

_ROW_TEMPLATES: dict[EntryKind, str] = {
    EntryKind.SYMLINK_DIRECTORY: "{dir_color}{name}{reset} -> {link_color}{target}{reset}",
    EntryKind.SYMLINK_FILE: "{name} -> {link_color}{target}{reset}",
    EntryKind.DIRECTORY_DENIED: "{dir_color}{name}{reset} [{denied}]",
    EntryKind.DIRECTORY: "{dir_color}{name}{reset}",
    EntryKind.FILE: "{name}",
}


def branch_glyph(last: bool) -> str:
    return LAST_BRANCH_GLYPH if last else BRANCH_GLYPH


def continuation_glyph(last: bool) -> str:
    """Return the indentation segment children of this entry inherit."""
    return LAST_CONTINUATION_GLYPH if last else CONTINUATION_GLYPH


def format_entry_row(
    prefix: Sequence[str],
    last: bool,
    name: str,
    kind: EntryKind,
    link_target: str = "",
    theme: TreeTheme | None = None,
) -> str:
    """Render one tree row without its trailing newline.

    ``prefix`` holds the continuation segments of every ancestor, outermost
    first. ``link_target`` is only shown for symlink kinds.
    """
    active_theme = theme or DEFAULT_THEME
    body = _ROW_TEMPLATES[kind].format(
        name=name,
        target=link_target,
        denied=ACCESS_DENIED_LABEL,
        dir_color=active_theme.directory,
        link_color=active_theme.link_target,
        reset=active_theme.reset,
    )
    return f"{''.join(prefix)}{branch_glyph(last)} {body}"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_summary(totals: TreeTotals) -> str:
    """Return ``N directories, M files`` with singular forms for exactly one."""
    return (
        f"{_plural(totals.directories, 'directory', 'directories')}, "
        f"{_plural(totals.files, 'file', 'files')}"
    )


__all__ = [
    "BRANCH_GLYPH",
    "LAST_BRANCH_GLYPH",
    "CONTINUATION_GLYPH",
    "LAST_CONTINUATION_GLYPH",
    "ACCESS_DENIED_LABEL",
    "branch_glyph",
    "continuation_glyph",
    "format_entry_row",
    "format_summary",
]

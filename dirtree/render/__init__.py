"""Row and summary rendering for directory trees."""

from __future__ import annotations

from .rows import (
    ACCESS_DENIED_LABEL,
    BRANCH_GLYPH,
    CONTINUATION_GLYPH,
    LAST_BRANCH_GLYPH,
    LAST_CONTINUATION_GLYPH,
    branch_glyph,
    continuation_glyph,
    format_entry_row,
    format_summary,
)

__all__ = [
    "ACCESS_DENIED_LABEL",
    "BRANCH_GLYPH",
    "CONTINUATION_GLYPH",
    "LAST_BRANCH_GLYPH",
    "LAST_CONTINUATION_GLYPH",
    "branch_glyph",
    "continuation_glyph",
    "format_entry_row",
    "format_summary",
]

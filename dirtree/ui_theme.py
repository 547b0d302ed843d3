"""Tree theme definitions and selection helpers.

Themes are ANSI palettes for the two colored spans a tree row can carry:
directory names and symlink targets. Color codes are taken from
``pygments.console`` so palettes are named rather than hand-written escapes.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

ANSI_RESET = "\033[0m"


@dataclass(frozen=True)
class TreeTheme:
    """Semantic ANSI palette used by row renderers."""

    name: str
    directory: str
    link_target: str
    reset: str


DEFAULT_THEME = TreeTheme(
    name="default",
    directory=codes["brightblue"],
    link_target=codes["brightgreen"],
    reset=ANSI_RESET,
)

OCEAN_THEME = TreeTheme(
    name="ocean",
    directory=codes["brightcyan"],
    link_target=codes["yellow"],
    reset=ANSI_RESET,
)

PLAIN_THEME = TreeTheme(
    name="plain",
    directory="",
    link_target="",
    reset="",
)

_THEMES: dict[str, TreeTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> TreeTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ANSI_RESET",
    "TreeTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]

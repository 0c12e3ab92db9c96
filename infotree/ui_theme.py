"""Terminal palettes for printed info trees.

Themes colour tree chrome, badges, and visibility markers. Colouring of
reference values is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    tree_marker: str
    property_key: str
    property_value: str
    category: str
    file_group: str
    badge: str
    implicit: str
    visibility_public: str
    visibility_private: str
    visibility_protected: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    property_key="\033[38;5;109m",
    property_value="\033[38;5;252m",
    category="\033[1;34m",
    file_group="\033[38;5;110m",
    badge="\033[38;5;229m",
    implicit="\033[2;38;5;250m",
    visibility_public="\033[38;5;42m",
    visibility_private="\033[38;5;203m",
    visibility_protected="\033[38;5;214m",
    error="\033[1;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    property_key="\033[38;5;73m",
    property_value="\033[38;5;153m",
    category="\033[1;38;5;45m",
    file_group="\033[38;5;117m",
    badge="\033[38;5;153m",
    implicit="\033[2;38;5;110m",
    visibility_public="\033[38;5;84m",
    visibility_private="\033[38;5;210m",
    visibility_protected="\033[38;5;215m",
    error="\033[1;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_marker="",
    property_key="",
    property_value="",
    category="",
    file_group="",
    badge="",
    implicit="",
    visibility_public="",
    visibility_private="",
    visibility_protected="",
    error="",
)

_THEMES: dict[str, UITheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def visibility_color(theme: UITheme, visibility: str | None) -> str:
    """Colour for a visibility class, empty when there is none."""
    if visibility == "public":
        return theme.visibility_public
    if visibility == "private":
        return theme.visibility_private
    if visibility == "protected":
        return theme.visibility_protected
    return ""


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "visibility_color",
]

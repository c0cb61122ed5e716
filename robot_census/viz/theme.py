"""Visualization theme presets for occupancy renderers.

Themes are frozen dataclasses that group all styling constants together so
a palette can be swapped via the ``--theme`` CLI argument.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    occupied_color: str = "#FFFFFF"
    empty_color: str = "#000000"
    center_line_color: str = "#C62828"
    density_cmap: str = "magma"
    grid_line_color: str = "#333333"


DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    occupied_color="#000000",
    empty_color="#FFFFFF",
    center_line_color="#1f77b4",
    density_cmap="Greys",
    grid_line_color="#E0E0E0",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]

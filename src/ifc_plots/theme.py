"""Pure data: the IFC chart theme.

No library imports — ``build_theme`` describes the look as plain mappings
keyed by decoration element, and ``style.py`` translates them for matplotlib.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

ThemeConfig = Mapping[str, Mapping[str, Any]]

TEXT_COLOR = "black"
GREY50 = "#7F7F7F"
GREY95 = "#F2F2F2"

# Chart layout constants that do not scale with the base font size
LAYOUT = {
    "figsize": (8.0, 5.0),
    "dpi": 100,
    "line_width": 1.5,
    "spine_width": 0.8,
    "grid_width": 0.5,
    "grid_color": "#EBEBEB",
}


def build_theme(base_size: int = 12, base_family: str = "sans-serif") -> ThemeConfig:
    """Return the IFC theme for a base font size and family.

    Only the size and family vary; everything else is a fixed brand
    decision: legend at the bottom, plain centered titles, grey left-aligned
    caption, horizontal major gridlines only, transparent background.
    """
    if isinstance(base_size, bool) or not isinstance(base_size, int) or base_size <= 3:
        raise ValueError(f"base_size must be an integer above 3, got {base_size!r}")

    elements: dict[str, dict[str, Any]] = {
        "text": {"size": base_size, "family": base_family, "color": TEXT_COLOR},
        "title": {"size": base_size + 2, "color": TEXT_COLOR, "weight": "normal", "ha": "center"},
        "subtitle": {"size": base_size - 2, "color": TEXT_COLOR, "weight": "normal", "ha": "center"},
        "axis-title": {"size": base_size - 2, "color": TEXT_COLOR, "weight": "normal"},
        "legend-title": {"size": base_size - 2, "color": TEXT_COLOR, "weight": "normal"},
        "axis-text": {"size": base_size - 3, "color": TEXT_COLOR},
        "legend-text": {"size": base_size - 3, "color": TEXT_COLOR},
        "caption": {"size": base_size, "color": GREY50, "ha": "left"},
        "legend": {"position": "bottom"},
        "panel-grid-major-x": {"visible": False},
        "panel-grid-minor-x": {"visible": False},
        "panel-grid-minor-y": {"visible": False},
        "panel-grid-major-y": {"visible": True, "color": LAYOUT["grid_color"]},
        "strip-background": {"fill": GREY95, "color": None},
        "panel-spacing": {"mm": 7},
        "plot-background": {"fill": "none"},
    }
    return MappingProxyType(
        {name: MappingProxyType(attrs) for name, attrs in elements.items()}
    )

"""Translate the theme.py element mapping into matplotlib rcParams."""

import logging

import matplotlib as mpl
import matplotlib.pyplot as plt

from .palette import hex_values
from .scales import DEFAULT_SEQUENCE
from .theme import LAYOUT, ThemeConfig, build_theme

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4


def rcparams(theme: ThemeConfig) -> dict:
    """Build an rcParams dict from a theme built by ``build_theme``."""
    text = theme["text"]
    title = theme["title"]
    axis_title = theme["axis-title"]
    axis_text = theme["axis-text"]
    grid = theme["panel-grid-major-y"]
    # constrained layout pads each side of an axes, so halve the spacing
    pad = theme["panel-spacing"]["mm"] / MM_PER_INCH / 2

    return {
        # Figure
        "figure.figsize": LAYOUT["figsize"],
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": theme["plot-background"]["fill"],
        "figure.edgecolor": "none",
        "figure.constrained_layout.use": True,
        "figure.constrained_layout.w_pad": pad,
        "figure.constrained_layout.h_pad": pad,
        "savefig.facecolor": theme["plot-background"]["fill"],
        "savefig.edgecolor": "none",
        "savefig.transparent": True,
        "savefig.bbox": "tight",

        # Axes — classic look, left and bottom spines only
        "axes.facecolor": "white",
        "axes.edgecolor": text["color"],
        "axes.linewidth": LAYOUT["spine_width"],
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.titlesize": title["size"],
        "axes.titleweight": title["weight"],
        "axes.titlecolor": title["color"],
        "axes.titlelocation": title["ha"],
        "axes.labelsize": axis_title["size"],
        "axes.labelweight": axis_title["weight"],
        "axes.labelcolor": axis_title["color"],
        "axes.prop_cycle": mpl.cycler(color=hex_values(DEFAULT_SEQUENCE)),

        # Grid — major horizontal lines only
        "axes.grid": grid["visible"],
        "axes.grid.axis": "y",
        "axes.grid.which": "major",
        "axes.axisbelow": True,
        "grid.color": grid["color"],
        "grid.linewidth": LAYOUT["grid_width"],

        # Ticks
        "xtick.labelsize": axis_text["size"],
        "ytick.labelsize": axis_text["size"],
        "xtick.labelcolor": axis_text["color"],
        "ytick.labelcolor": axis_text["color"],

        # Lines
        "lines.linewidth": LAYOUT["line_width"],

        # Legend
        "legend.frameon": False,
        "legend.fontsize": theme["legend-text"]["size"],
        "legend.title_fontsize": theme["legend-title"]["size"],
        "legend.labelcolor": theme["legend-text"]["color"],

        # Font
        "font.family": text["family"],
        "font.size": text["size"],
        "text.color": text["color"],
    }


# rcParams for the default theme (base_size 12, sans-serif)
STYLE: dict = rcparams(build_theme())


def apply(base_size: int = 12, base_family: str = "sans-serif") -> None:
    """Apply the IFC theme to matplotlib globally."""
    plt.rcParams.update(rcparams(build_theme(base_size, base_family)))
    logger.debug("applied IFC style (base_size=%s, base_family=%s)", base_size, base_family)


def context(base_size: int = 12, base_family: str = "sans-serif"):
    """Context manager applying the IFC theme only inside a ``with`` block."""
    return mpl.rc_context(rcparams(build_theme(base_size, base_family)))

"""Convenience chart functions: figure(), labels(), legend(), bar(), scatter(),
show_palette(), save()."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Sequence

import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import ArrayLike

from .palette import IFC_PALETTE
from .scales import ContinuousScale, DiscreteScale, scale_color_continuous, scale_fill
from .style import apply
from .theme import ThemeConfig, build_theme

logger = logging.getLogger(__name__)

# Default output directory, relative to the working directory unless absolute
OUTPUT_DIR_ENV = "IFC_PLOTS_OUTPUT_DIR"
DEFAULT_OUTPUT_DIR = "charts"

# legend position -> (loc, bbox_to_anchor) outside the axes
_LEGEND_PLACEMENT = {
    "bottom": ("upper center", (0.5, -0.12)),
    "top": ("lower center", (0.5, 1.02)),
    "right": ("center left", (1.02, 0.5)),
    "left": ("center right", (-0.1, 0.5)),
}


def _ensure_style() -> None:
    """Apply the IFC style if not already applied."""
    apply()


def figure(
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair. Escape hatch for custom charts."""
    _ensure_style()
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def labels(
    ax: plt.Axes,
    title: str | None = None,
    subtitle: str | None = None,
    caption: str | None = None,
    theme: ThemeConfig | None = None,
) -> None:
    """Centered title and subtitle above the axes, grey caption bottom-left."""
    theme = theme or build_theme()
    sub = theme["subtitle"]

    if title:
        head = theme["title"]
        # leave room for the subtitle line between title and axes
        pad = 6 + (sub["size"] * 1.6 if subtitle else 0)
        ax.set_title(
            title, loc=head["ha"], fontsize=head["size"],
            fontweight=head["weight"], color=head["color"], pad=pad,
        )
    if subtitle:
        ax.annotate(
            subtitle, xy=(0.5, 1.0), xycoords="axes fraction",
            xytext=(0, 6), textcoords="offset points",
            ha=sub["ha"], va="bottom", fontsize=sub["size"],
            fontweight=sub["weight"], color=sub["color"],
        )
    if caption:
        cap = theme["caption"]
        below = ax.get_legend()
        if below is not None and theme["legend"]["position"] == "bottom":
            # hang the caption under the legend's lower edge
            xycoords, offset = ("axes fraction", below), -6
        else:
            xycoords, offset = "axes fraction", -4 * theme["axis-title"]["size"]
        ax.annotate(
            caption, xy=(0.0, 0.0), xycoords=xycoords,
            xytext=(0, offset), textcoords="offset points",
            ha=cap["ha"], va="top", fontsize=cap["size"], color=cap["color"],
            annotation_clip=False,
        )


def legend(ax: plt.Axes, theme: ThemeConfig | None = None, **kwargs: Any):
    """Legend outside the axes at the theme's position, one row when at the bottom."""
    theme = theme or build_theme()
    position = theme["legend"]["position"]
    loc, anchor = _LEGEND_PLACEMENT[position]
    _, names = ax.get_legend_handles_labels()

    options = {
        "loc": loc,
        "bbox_to_anchor": anchor,
        "frameon": False,
        "fontsize": theme["legend-text"]["size"],
        "title_fontsize": theme["legend-title"]["size"],
    }
    if position in ("bottom", "top"):
        options["ncol"] = max(1, len(names))
    options.update(kwargs)
    return ax.legend(**options)


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to the output directory and close it.

    The default directory is ``$IFC_PLOTS_OUTPUT_DIR`` or ``./charts``; the
    variable is read on every call, so it can be set after import.
    Returns the path to the saved file.
    """
    dest = Path(output_dir or os.environ.get(OUTPUT_DIR_ENV, DEFAULT_OUTPUT_DIR))
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    logger.info("saved chart to %s", path)
    return path


def bar(
    x: Sequence[Any],
    y: ArrayLike | dict[str, ArrayLike],
    *,
    scale: DiscreteScale | None = None,
    title: str | None = None,
    subtitle: str | None = None,
    caption: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    bar_width: float = 0.8,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Bar chart. Pass a dict of {label: y_values} for grouped bars.

    A single series is drawn in the scale's first color (green by default);
    grouped series take the scale's colors in order.
    """
    scale = scale or scale_fill()
    fig, ax = figure(figsize=figsize)
    positions = np.arange(len(x))

    if isinstance(y, dict):
        colors = scale.palette(y.keys())
        n = len(y)
        width = bar_width / n
        offsets = np.linspace(-(n - 1) / 2 * width, (n - 1) / 2 * width, n)
        for offset, (label, y_data) in zip(offsets, y.items()):
            ax.bar(positions + offset, y_data, width=width, label=label,
                   color=colors[label], **kwargs)
        legend(ax, title=scale.name)
    else:
        ax.bar(positions, y, width=bar_width, color=scale.values[0], **kwargs)

    ax.set_xticks(positions)
    ax.set_xticklabels([str(v) for v in x])
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    labels(ax, title, subtitle, caption)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax


def scatter(
    x: ArrayLike,
    y: ArrayLike,
    *,
    color: ArrayLike | None = None,
    scale: ContinuousScale | None = None,
    title: str | None = None,
    subtitle: str | None = None,
    caption: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Scatter plot. Pass ``color`` values to shade points with a gradient scale."""
    fig, ax = figure(figsize=figsize)

    if color is not None:
        scale = scale or scale_color_continuous()
        points = ax.scatter(x, y, c=color, **scale.mpl_kwargs(color), **kwargs)
        cbar = fig.colorbar(points, ax=ax, location="bottom", shrink=0.6)
        if scale.name:
            cbar.set_label(scale.name)
    else:
        ax.scatter(x, y, **kwargs)

    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    labels(ax, title, subtitle, caption)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax


def show_palette(
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Swatch chart of the nine palette colors, labelled by position and name."""
    fig, ax = figure(figsize=figsize)
    for position, entry in enumerate(IFC_PALETTE, start=1):
        ax.scatter(position, position, s=900, color=entry.hex)
        ax.annotate(
            f"{position}. {entry.name}\n{entry.hex}", xy=(position, position),
            xytext=(22, 0), textcoords="offset points", va="center",
        )
    ax.set_xlim(0, len(IFC_PALETTE) + 3)
    ax.set_ylim(0, len(IFC_PALETTE) + 1)
    ax.set_axis_off()
    return fig, ax

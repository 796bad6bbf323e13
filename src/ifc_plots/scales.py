"""Discrete and continuous IFC color scales.

A scale is a plain value: the ordered colors plus whatever options the
caller passed. It hands matplotlib what it needs (a colormap, a norm, a
color cycle, or a level -> color mapping) when a chart is drawn.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping, Sequence

import matplotlib as mpl
import matplotlib.colors as mcolors
import numpy as np
from numpy.typing import ArrayLike

from .colors import tint
from .errors import (
    InsufficientValues,
    InvalidColorName,
    InvalidIndex,
    InvalidType,
    KeyNotFound,
)
from .palette import lookup

logger = logging.getLogger(__name__)

# Brand-guide order for categorical data: green, purple, brown, red,
# light grey, blue (1-based palette positions)
DEFAULT_SEQUENCE = (4, 5, 9, 6, 7, 8)

SCALE_TYPES = ("sequential", "diverging")

NA_VALUE = "#7F7F7F"  # grey50

SEQUENTIAL_FACTORS = [i / 5 for i in range(1, 6)]   # light -> dark
DIVERGING_FACTORS = [i / 5 for i in range(5, 2, -1)]  # dark -> light


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


@dataclass(frozen=True)
class DiscreteScale:
    """Manual color scale for categorical data."""

    aesthetic: str
    values: tuple[str, ...]
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.options.get("name")

    @property
    def na_value(self) -> str:
        return self.options.get("na_value", NA_VALUE)

    def palette(self, levels: Iterable[Hashable] | None = None) -> dict:
        """Pair levels with colors in order.

        Defaults to the ``breaks`` option when no levels are given.

        Raises:
            InsufficientValues: If there are more levels than colors.
        """
        if levels is None:
            levels = self.options.get("breaks", ())
        levels = list(levels)
        if len(levels) > len(self.values):
            raise InsufficientValues(
                f"{len(levels)} levels need colors but the scale has only "
                f"{len(self.values)}"
            )
        return dict(zip(levels, self.values))

    def map(self, data: Iterable[Hashable]) -> list[str]:
        """Color each datum; levels are taken in order of first appearance."""
        data = list(data)
        levels = self.options.get("breaks")
        if levels is None:
            levels = list(dict.fromkeys(v for v in data if not _is_missing(v)))
        mapping = self.palette(levels)
        return [mapping.get(v, self.na_value) for v in data]

    @property
    def cmap(self) -> mcolors.ListedColormap:
        return mcolors.ListedColormap(
            list(self.values), name=self.name or f"ifc_{self.aesthetic}"
        )

    @property
    def cycler(self):
        """Color cycle for ``axes.prop_cycle`` or ``Axes.set_prop_cycle``."""
        return mpl.cycler(color=list(self.values))


@dataclass(frozen=True)
class ContinuousScale:
    """Gradient color scale through an ordered list of colors."""

    aesthetic: str
    colours: tuple[str, ...]
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.options.get("name")

    @property
    def na_value(self) -> str:
        return self.options.get("na_value", NA_VALUE)

    @property
    def cmap(self) -> mcolors.Colormap:
        cmap = mcolors.LinearSegmentedColormap.from_list(
            self.name or f"ifc_{self.aesthetic}_gradient", list(self.colours)
        )
        if self.options.get("limits") is not None:
            # values outside explicit limits are treated as missing
            return cmap.with_extremes(
                bad=self.na_value, under=self.na_value, over=self.na_value
            )
        return cmap.with_extremes(bad=self.na_value)

    def norm(self, values: ArrayLike | None = None) -> mcolors.Normalize:
        """Normalize from the ``limits`` option, else from the data range."""
        limits = self.options.get("limits")
        if limits is not None:
            low, high = limits
            return mcolors.Normalize(vmin=low, vmax=high)
        if values is None:
            return mcolors.Normalize()

        arr = np.asarray(values, dtype=float)
        if np.isnan(arr).all():
            return mcolors.Normalize()
        low, high = np.nanmin(arr), np.nanmax(arr)
        if low == high:
            # zero-width range: every value sits at the middle of the gradient
            low, high = low - 1, high + 1
        return mcolors.Normalize(vmin=low, vmax=high)

    def map(self, values: ArrayLike) -> list[str]:
        arr = np.atleast_1d(np.asarray(values, dtype=float))
        rgba = self.cmap(self.norm(arr)(arr))
        return [mcolors.to_hex(c).upper() for c in rgba]

    def mpl_kwargs(self, values: ArrayLike | None = None) -> dict:
        """Keyword arguments for ``scatter``, ``imshow`` and friends."""
        return {"cmap": self.cmap, "norm": self.norm(values)}


def _discrete(aesthetic: str, sequence: Sequence[int], options: dict) -> DiscreteScale:
    values = []
    for position in sequence:
        try:
            values.append(lookup(position).hex)
        except KeyNotFound as exc:
            raise InvalidIndex(f"bad palette position in sequence: {exc}") from None

    logger.debug("built %s scale from palette positions %s", aesthetic, list(sequence))
    return DiscreteScale(aesthetic, tuple(values), MappingProxyType(dict(options)))


def scale_fill(*, sequence: Sequence[int] = DEFAULT_SEQUENCE, **options: Any) -> DiscreteScale:
    """IFC fill scale for bars, areas and other filled marks.

    Args:
        sequence: 1-based palette positions, in the order levels take them.
        **options: Passed through to the scale (``name``, ``breaks``,
            ``na_value``).

    Raises:
        InvalidIndex: If a position is not in the palette.
    """
    return _discrete("fill", sequence, options)


def scale_color_discrete(
    *, sequence: Sequence[int] = DEFAULT_SEQUENCE, **options: Any
) -> DiscreteScale:
    """IFC color scale for points and lines of categorical data."""
    return _discrete("color", sequence, options)


def _match_type(value: str) -> str:
    """Resolve ``value`` to a scale type, accepting unique prefixes."""
    if isinstance(value, str) and value:
        if value in SCALE_TYPES:
            return value
        matches = [t for t in SCALE_TYPES if t.startswith(value)]
        if len(matches) == 1:
            return matches[0]
    raise InvalidType(f"type must be one of {', '.join(SCALE_TYPES)}; got {value!r}")


def _endpoint(col: str | int) -> str:
    try:
        return lookup(col).hex
    except KeyNotFound as exc:
        raise InvalidColorName(str(exc)) from None


def gradient_colours(
    type: str = "sequential", first_col: str | int = "red", second_col: str | int = "blue"
) -> list[str]:
    """Ordered gradient stops for a sequential or diverging IFC scale."""
    kind = _match_type(type)
    first = _endpoint(first_col)
    if kind == "sequential":
        return tint(first, SEQUENTIAL_FACTORS)

    second = _endpoint(second_col)
    return tint(first, DIVERGING_FACTORS) + tint(second, DIVERGING_FACTORS[::-1])


def _continuous(aesthetic: str, type, first_col, second_col, options: dict) -> ContinuousScale:
    colours = gradient_colours(type, first_col, second_col)
    logger.debug("built %s gradient %s", aesthetic, colours)
    return ContinuousScale(aesthetic, tuple(colours), MappingProxyType(dict(options)))


def scale_color_continuous(
    type: str = "sequential",
    first_col: str | int = "red",
    second_col: str | int = "blue",
    **options: Any,
) -> ContinuousScale:
    """IFC gradient color scale.

    ``sequential`` runs from a pale tint of ``first_col`` to the full color.
    ``diverging`` runs from ``first_col`` through a pale middle to
    ``second_col``, which is ignored for sequential scales.

    Raises:
        InvalidType: If ``type`` is not a (prefix of a) known scale type.
        InvalidColorName: If a color is not in the palette.
    """
    return _continuous("color", type, first_col, second_col, options)


def scale_fill_continuous(
    type: str = "sequential",
    first_col: str | int = "red",
    second_col: str | int = "blue",
    **options: Any,
) -> ContinuousScale:
    return _continuous("fill", type, first_col, second_col, options)


scale_colour_discrete = scale_color_discrete
scale_colour_continuous = scale_color_continuous

"""Color resolution and tinting.

Anything matplotlib can parse is accepted as a color, plus the names and
1-based positions of the IFC palette.
"""

from __future__ import annotations

from numbers import Integral, Real
from typing import Any, Sequence, Union

import matplotlib.colors as mcolors
import numpy as np
from numpy.typing import ArrayLike

from .errors import InvalidColor, InvalidFactor, KeyNotFound
from .palette import PaletteEntry, lookup

ColorInput = Union[str, int, PaletteEntry, tuple]


def to_rgb255(color: ColorInput) -> tuple[int, int, int]:
    """Resolve ``color`` to integer RGB channels in [0, 255]."""
    if isinstance(color, PaletteEntry):
        color = color.hex
    elif isinstance(color, Integral) and not isinstance(color, bool):
        try:
            color = lookup(color).hex
        except KeyNotFound as exc:
            raise InvalidColor(str(exc)) from None
    elif isinstance(color, str):
        try:
            color = lookup(color).hex
        except KeyNotFound:
            pass  # not a palette name, let matplotlib have a go

    try:
        rgb = mcolors.to_rgb(color)
    except (ValueError, TypeError):
        raise InvalidColor(f"cannot interpret {color!r} as a color") from None

    return tuple(int(np.floor(channel * 255 + 0.5)) for channel in rgb)


def to_hex(color: ColorInput) -> str:
    """Uppercase ``#RRGGBB`` form of any accepted color."""
    return _hex(to_rgb255(color))


def _hex(rgb: Sequence[float]) -> str:
    # Round half up, as R's rgb() and most CSS tooling do
    r, g, b = (int(np.floor(channel + 0.5)) for channel in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def _is_single_color(colors: Any) -> bool:
    if isinstance(colors, (str, PaletteEntry)):
        return True
    if isinstance(colors, Integral):
        return not isinstance(colors, bool)
    # An RGB(A) tuple with a fractional channel is one color; all-integer
    # tuples are palette positions
    return (
        isinstance(colors, tuple)
        and len(colors) in (3, 4)
        and all(isinstance(v, Real) and not isinstance(v, bool) for v in colors)
        and not all(isinstance(v, Integral) for v in colors)
    )


def _factors(factor: float | ArrayLike) -> np.ndarray:
    try:
        factors = np.atleast_1d(np.asarray(factor, dtype=float))
    except (TypeError, ValueError):
        raise InvalidFactor(f"tint factor must be numeric, got {factor!r}") from None

    if factors.ndim != 1:
        raise InvalidFactor("tint factor must be a number or a flat sequence")
    if np.isnan(factors).any() or (factors < 0).any() or (factors > 1).any():
        raise InvalidFactor(f"tint factor must lie in [0, 1], got {factor!r}")
    return factors


def tint(
    colors: ColorInput | Sequence[ColorInput],
    factor: float | ArrayLike,
) -> list[str]:
    """Make colors paler by mixing them with white.

    Each channel becomes ``(255 - c) * (1 - factor) + c``, so a factor of 1
    returns the color unchanged and 0 returns white. One factor may be
    applied to many colors, or many factors to one color; otherwise the
    two must have the same length.

    Returns:
        Uppercase ``#RRGGBB`` strings, one per broadcast element.

    Raises:
        InvalidColor: If a color cannot be resolved.
        InvalidFactor: If a factor lies outside [0, 1] or the lengths
            cannot be broadcast.
    """
    items = [colors] if _is_single_color(colors) else list(colors)
    factors = _factors(factor)

    if len(items) != len(factors) and 1 not in (len(items), len(factors)):
        raise InvalidFactor(
            f"cannot pair {len(items)} colors with {len(factors)} tint factors"
        )

    rgb = np.array([to_rgb255(c) for c in items], dtype=float).reshape(-1, 3)
    tinted = (255 - rgb) * (1 - factors[:, np.newaxis]) + rgb
    return [_hex(row) for row in tinted]

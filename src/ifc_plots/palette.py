"""Pure data: the IFC corporate palette and lookups into it.

No library imports — the palette is plain Python data so any consumer
(matplotlib, Vega, Plotly) can use it. Positions are 1-based, matching the
numbering in the IFC brand guide.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from types import MappingProxyType
from typing import Iterable, Sequence

from .errors import InvalidType, KeyNotFound

PRIMARY = "primary"
SECONDARY = "secondary"


@dataclass(frozen=True)
class PaletteEntry:
    """One brand color. ``rgb`` is derived from ``hex`` so they always agree."""

    name: str
    hex: str
    category: str
    usage: str
    rgb: tuple[float, float, float] = field(init=False)

    def __post_init__(self) -> None:
        digits = self.hex.lstrip("#")
        channels = tuple(int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
        object.__setattr__(self, "rgb", channels)


# (name, hex, category, usage) in brand-guide order
_ROWS = [
    ("process cyan",   "#00ADE4", PRIMARY,   "general"),
    ("corporate grey", "#808080", PRIMARY,   "general"),
    ("dark blue",      "#002345", PRIMARY,   "general"),
    ("green",          "#006446", SECONDARY, "reports & fact sheets"),
    ("purple",         "#87189D", SECONDARY, "reports & fact sheets"),
    ("red",            "#A4123F", SECONDARY, "reports & fact sheets"),
    ("light grey",     "#BCD19B", SECONDARY, "reports & fact sheets"),
    ("blue",           "#485CC7", SECONDARY, "reports & fact sheets"),
    ("brown",          "#C69214", SECONDARY, "reports & fact sheets"),
]

IFC_PALETTE: tuple[PaletteEntry, ...] = tuple(PaletteEntry(*row) for row in _ROWS)

_BY_NAME = MappingProxyType({entry.name: entry for entry in IFC_PALETTE})

# name -> hex, for quick access in plotting code
IFC_COLORS = MappingProxyType({entry.name: entry.hex for entry in IFC_PALETTE})


def lookup(key: str | int) -> PaletteEntry:
    """Return the palette entry for a name or a 1-based position.

    Raises:
        KeyNotFound: If the name is not in the palette or the position is
            outside ``[1, len(IFC_PALETTE)]``.
    """
    if isinstance(key, str):
        try:
            return _BY_NAME[key]
        except KeyError:
            raise KeyNotFound(f"'{key}' is not an IFC palette color") from None

    # bool is an int subclass but never a meaningful position
    if isinstance(key, Integral) and not isinstance(key, bool):
        if 1 <= key <= len(IFC_PALETTE):
            return IFC_PALETTE[int(key) - 1]
        raise KeyNotFound(
            f"palette position {key} is outside [1, {len(IFC_PALETTE)}]"
        )

    raise KeyNotFound(f"cannot look up palette color by {key!r}")


def lookup_many(keys: Iterable[str | int]) -> list[PaletteEntry]:
    """Resolve several keys in order. Fails as a whole on the first bad key."""
    return [lookup(key) for key in keys]


def names() -> list[str]:
    return [entry.name for entry in IFC_PALETTE]


def hex_values(keys: Sequence[str | int] | None = None) -> list[str]:
    """Hex column of the palette, optionally restricted to ``keys``."""
    entries = IFC_PALETTE if keys is None else lookup_many(keys)
    return [entry.hex for entry in entries]


def by_category(category: str) -> list[PaletteEntry]:
    if category not in (PRIMARY, SECONDARY):
        raise InvalidType(
            f"category must be '{PRIMARY}' or '{SECONDARY}', got {category!r}"
        )
    return [entry for entry in IFC_PALETTE if entry.category == category]

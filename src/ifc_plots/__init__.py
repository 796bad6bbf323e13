"""ifc-plots — IFC-branded matplotlib charts."""

import logging

from .charts import bar, figure, labels, legend, save, scatter, show_palette
from .colors import tint, to_hex, to_rgb255
from .errors import (
    BrandingError,
    InsufficientValues,
    InvalidColor,
    InvalidColorName,
    InvalidFactor,
    InvalidIndex,
    InvalidType,
    KeyNotFound,
)
from .palette import IFC_COLORS, IFC_PALETTE, PaletteEntry, lookup, lookup_many
from .scales import (
    DEFAULT_SEQUENCE,
    ContinuousScale,
    DiscreteScale,
    scale_color_continuous,
    scale_color_discrete,
    scale_colour_continuous,
    scale_colour_discrete,
    scale_fill,
    scale_fill_continuous,
)
from .style import apply, context
from .theme import build_theme

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "bar",
    "figure",
    "labels",
    "legend",
    "save",
    "scatter",
    "show_palette",
    "tint",
    "to_hex",
    "to_rgb255",
    "BrandingError",
    "InsufficientValues",
    "InvalidColor",
    "InvalidColorName",
    "InvalidFactor",
    "InvalidIndex",
    "InvalidType",
    "KeyNotFound",
    "IFC_COLORS",
    "IFC_PALETTE",
    "PaletteEntry",
    "lookup",
    "lookup_many",
    "DEFAULT_SEQUENCE",
    "ContinuousScale",
    "DiscreteScale",
    "scale_color_continuous",
    "scale_color_discrete",
    "scale_colour_continuous",
    "scale_colour_discrete",
    "scale_fill",
    "scale_fill_continuous",
    "apply",
    "context",
    "build_theme",
]

"""Input-validation errors raised by ifc-plots.

All of them are configuration-time failures: they surface immediately to the
caller and nothing is partially built.
"""


class BrandingError(Exception):
    """Base class for every ifc-plots error."""


class KeyNotFound(BrandingError, KeyError):
    """A palette name is absent or a palette index is outside [1, N]."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class InvalidIndex(KeyNotFound):
    """A scale sequence refers to a palette position that does not exist."""


class InvalidColorName(KeyNotFound):
    """A continuous scale endpoint is not a palette entry."""


class InvalidColor(BrandingError, ValueError):
    """A color input cannot be resolved to an RGB triple."""


class InvalidFactor(BrandingError, ValueError):
    """A tint factor is outside [0, 1] or cannot be broadcast."""


class InvalidType(BrandingError, ValueError):
    """An enumerated argument has an unrecognised value."""


class InsufficientValues(BrandingError, ValueError):
    """A discrete scale has fewer colors than the levels it must map."""

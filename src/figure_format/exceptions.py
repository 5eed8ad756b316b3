"""Exception hierarchy for figure_format.

Every error raised by the package derives from ``FigureFormatError``. All of
them are configuration errors: they are raised while building a ``Style``,
before any figure is touched.

Example::

    from figure_format import UnknownColorError, string2rgb

    try:
        rgb = string2rgb("RoyalBlue")
    except UnknownColorError as exc:
        print(exc.valid_names[:5])
"""

from __future__ import annotations

from collections.abc import Sequence


class FigureFormatError(Exception):
    """Base exception for all figure_format errors."""


class ConfigurationError(FigureFormatError):
    """Raised for an unusable palette, dash list or other style setting."""


class UnknownColorError(ConfigurationError, KeyError):
    """Raised when a color name is not in the color table."""

    def __init__(self, name: str, valid_names: Sequence[str], reference: str = "") -> None:
        self.name = name
        self.valid_names = list(valid_names)
        self.reference = reference
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"'{self.name}' is not a valid color."
        if self.reference:
            msg = f"{msg} Valid colors:\n{self.reference}"
        return msg


class ColorNameTypeError(ConfigurationError, TypeError):
    """Raised when a color name is not a string."""

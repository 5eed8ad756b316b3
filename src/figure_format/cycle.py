"""Cyclic assignment of colors and dash patterns to plotted lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import TypeVar

from matplotlib.lines import Line2D

from .exceptions import ConfigurationError

T = TypeVar("T")

RGB = tuple[float, float, float]


class DashPattern(Enum):
    """Line dash patterns, valued by their matplotlib linestyle string."""

    SOLID = "-"
    DASHED = "--"
    DOTTED = ":"
    DASHDOT = "-."

    @classmethod
    def parse(cls, value: str | DashPattern) -> DashPattern:
        """Accept an enum member, its name (any case) or a linestyle string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown dash pattern: {value!r}") from None


def pick(ordinal: int, sequence: Sequence[T]) -> T:
    """Return the entry for a 1-based ``ordinal``, wrapping past the end.

    Ordinal 1 is the first entry and ``len(sequence) + 1`` is the first entry
    again, so the sequence behaves as a circular buffer.
    """
    if not sequence:
        raise ConfigurationError("Cannot cycle through an empty sequence.")
    if isinstance(ordinal, bool) or not isinstance(ordinal, Integral) or ordinal < 1:
        raise ValueError(f"Ordinal must be a positive integer, got {ordinal!r}")
    return sequence[(ordinal - 1) % len(sequence)]


@dataclass(frozen=True)
class LineStyleSpec:
    """Color, dash pattern and width for one line."""

    color: RGB
    dash: DashPattern
    width: float

    def apply(self, line: Line2D) -> None:
        line.set_color(self.color)
        line.set_linestyle(self.dash.value)
        line.set_linewidth(self.width)


def line_style(
    ordinal: int,
    palette: Sequence[RGB],
    dashes: Sequence[DashPattern],
    width: float,
) -> LineStyleSpec:
    """Style for the ``ordinal``-th line of an axes.

    Color and dash cycle independently; with 7 colors and 4 dashes the
    (color, dash) pair repeats every 28 lines.
    """
    return LineStyleSpec(pick(ordinal, palette), pick(ordinal, dashes), width)

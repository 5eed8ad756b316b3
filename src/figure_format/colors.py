"""Named color table and the ``string2rgb`` lookup.

The table ships as ``data/colors.csv`` (name, red, green, blue with channels
in 0-255) and is read once per process. Lookups are exact and case-sensitive:
``"RoyalBlue1"`` and ``"royal blue"`` are different entries, ``"royalblue1"``
is not an entry at all.
"""

from __future__ import annotations

import csv
import html
import io
import logging
from collections.abc import Iterator
from functools import lru_cache
from importlib import resources

import numpy as np

from .exceptions import ColorNameTypeError, UnknownColorError

logger = logging.getLogger(__name__)

_DATA_FILE = "colors.csv"

# Channels are divided by 256, not 255: white maps to 255/256 on purpose
_SCALE = 256.0


class ColorTable:
    """Read-only mapping of color name to an (R, G, B) triple in 0-255."""

    def __init__(self, entries: list[tuple[str, tuple[int, int, int]]]) -> None:
        self._names = [name for name, _ in entries]
        self._rgb = dict(entries)

    @classmethod
    def from_csv(cls, text: str) -> ColorTable:
        entries = []
        for row in csv.DictReader(io.StringIO(text)):
            rgb = (int(row["red"]), int(row["green"]), int(row["blue"]))
            entries.append((row["name"], rgb))
        return cls(entries)

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._rgb

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[tuple[str, tuple[int, int, int]]]:
        for name in self._names:
            yield name, self._rgb[name]

    def rgb255(self, name: str) -> tuple[int, int, int]:
        """Return the 0-255 triple for ``name``.

        Raises:
            ColorNameTypeError: ``name`` is not a string.
            UnknownColorError: ``name`` is not in the table.
        """
        if not isinstance(name, str):
            raise ColorNameTypeError(f"Color name must be a string, got {type(name).__name__}.")
        try:
            return self._rgb[name]
        except KeyError:
            logger.debug("Unknown color name %r", name)
            raise UnknownColorError(name, self._names, reference_table(self)) from None


@lru_cache(maxsize=1)
def load_color_table() -> ColorTable:
    """Load the packaged color table (cached)."""
    text = resources.files(__package__).joinpath("data").joinpath(_DATA_FILE).read_text(encoding="utf-8")
    table = ColorTable.from_csv(text)
    logger.debug("Loaded %d named colors", len(table))
    return table


def normalize(rgb255: tuple[int, int, int]) -> tuple[float, float, float]:
    """Scale a 0-255 triple into matplotlib's 0-1 range."""
    r, g, b = (np.asarray(rgb255, dtype=float) / _SCALE).tolist()
    return (r, g, b)


def string2rgb(name: str) -> tuple[float, float, float]:
    """Look up a color by name and return it as matplotlib RGB floats."""
    return normalize(load_color_table().rgb255(name))


def _hex(rgb255: tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb255)


def reference_table(table: ColorTable | None = None) -> str:
    """Plain-text listing of every valid color: name, hex, R, G, B."""
    table = table if table is not None else load_color_table()
    width = max((len(name) for name in table.names), default=4)
    lines = [f"{'Label':<{width}}  {'Hex':<7}  {'R':>3} {'G':>3} {'B':>3}"]
    for name, (r, g, b) in table:
        lines.append(f"{name:<{width}}  {_hex((r, g, b))}  {r:>3} {g:>3} {b:>3}")
    return "\n".join(lines)


def reference_html(table: ColorTable | None = None) -> str:
    """The same listing as an HTML page with a swatch column."""
    table = table if table is not None else load_color_table()
    rows = []
    for name, rgb in table:
        cells = [
            f"<td>{html.escape(name)}</td>",
            f'<td width="250" bgcolor="{_hex(rgb)}"></td>',
            *(f"<td>{channel}</td>" for channel in rgb),
        ]
        rows.append("\t\t<tr>" + "".join(cells) + "</tr>")
    header = "\t\t<tr><td>Label</td><td>Visual</td><td>R</td><td>G</td><td>B</td></tr>"
    return "\n".join(
        [
            "<html>",
            "<body>",
            "<p>Valid color names for <b><i>string2rgb</i></b>:</p>",
            '\t<table border="1">',
            header,
            *rows,
            "\t</table>",
            "</body>",
            "</html>",
        ]
    )

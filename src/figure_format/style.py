"""Translate theme.py constants into a validated, immutable Style."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from .colors import normalize, string2rgb
from .cycle import RGB, DashPattern
from .exceptions import ConfigurationError
from .roles import FontTreatment, Role
from .theme import BACKGROUND, DASHES, FONTS, LAYOUT, MUTED_RGB255, PALETTE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegendStyle:
    family: tuple[str, ...]
    weight: str
    size_px: float
    text_color: RGB
    line_width: float
    loc: str


@dataclass(frozen=True)
class AxesStyle:
    family: tuple[str, ...]
    tick_px: float
    color: RGB
    line_width: float
    tick_direction: str = "in"
    tick_length: float = 0.0


@dataclass(frozen=True)
class Style:
    """Everything one formatting pass needs; fixed before the pass starts."""

    palette: tuple[RGB, ...]
    dashes: tuple[DashPattern, ...]
    line_width: float
    treatments: Mapping[Role, FontTreatment]
    legend: LegendStyle
    axes: AxesStyle
    figure_px: tuple[int, int] = LAYOUT["figure_px"]
    window_origin_px: tuple[int, int] = LAYOUT["window_origin_px"]
    background: str = BACKGROUND

    def __post_init__(self) -> None:
        if len(self.palette) < 1:
            raise ConfigurationError("Palette must contain at least one color.")
        if len(self.dashes) < 1:
            raise ConfigurationError("Dash pattern list must contain at least one entry.")
        if Role.DEFAULT not in self.treatments:
            raise ConfigurationError("Font treatments must include Role.DEFAULT.")

    @classmethod
    def from_theme(
        cls,
        palette: Sequence[str] | None = None,
        dashes: Sequence[str | DashPattern] | None = None,
    ) -> Style:
        """Build a Style from color names and dash patterns.

        Unknown color names raise ``UnknownColorError``; empty lists raise
        ``ConfigurationError``. Both happen before any figure is touched.
        """
        names = list(PALETTE if palette is None else palette)
        patterns = list(DASHES if dashes is None else dashes)
        if not names:
            raise ConfigurationError("Palette must contain at least one color.")
        if not patterns:
            raise ConfigurationError("Dash pattern list must contain at least one entry.")

        muted = normalize(MUTED_RGB255)
        display = tuple(FONTS["display"])
        body = tuple(FONTS["body"])
        label = FontTreatment(muted, display, LAYOUT["label_weight"], LAYOUT["label_px"])
        title = FontTreatment(muted, display, LAYOUT["label_weight"], LAYOUT["title_px"])
        treatments = {
            Role.X_LABEL: label,
            Role.Y_LABEL: label,
            Role.Z_LABEL: label,
            Role.TITLE: title,
            Role.DEFAULT: label,
        }
        style = cls(
            palette=tuple(string2rgb(name) for name in names),
            dashes=tuple(DashPattern.parse(p) for p in patterns),
            line_width=LAYOUT["line_width"],
            treatments=MappingProxyType(treatments),
            legend=LegendStyle(
                family=body,
                weight=LAYOUT["legend_weight"],
                size_px=LAYOUT["legend_px"],
                text_color=muted,
                line_width=LAYOUT["legend_line_width"],
                loc=LAYOUT["legend_loc"],
            ),
            axes=AxesStyle(
                family=body,
                tick_px=LAYOUT["tick_px"],
                color=muted,
                line_width=LAYOUT["axis_line_width"],
            ),
        )
        logger.debug("Built style with %d colors and %d dash patterns", len(style.palette), len(style.dashes))
        return style


@lru_cache(maxsize=1)
def default_style() -> Style:
    """The theme's Style, built once per process."""
    return Style.from_theme()

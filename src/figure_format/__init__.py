"""figure-format — restyle finished matplotlib figures in one call."""

from .colors import load_color_table, reference_html, reference_table, string2rgb
from .cycle import DashPattern, LineStyleSpec, line_style, pick
from .exceptions import (
    ColorNameTypeError,
    ConfigurationError,
    FigureFormatError,
    UnknownColorError,
)
from .roles import FontTreatment, Role, TextRoleSignature, classify, classify_role, tag_role
from .style import Style, default_style
from .theme import DASHES, FONTS, LAYOUT, PALETTE
from .walker import figure_format, format_figure, format_figures

__all__ = [
    "figure_format",
    "format_figure",
    "format_figures",
    "Style",
    "default_style",
    "string2rgb",
    "load_color_table",
    "reference_table",
    "reference_html",
    "pick",
    "line_style",
    "DashPattern",
    "LineStyleSpec",
    "Role",
    "TextRoleSignature",
    "FontTreatment",
    "classify",
    "classify_role",
    "tag_role",
    "FigureFormatError",
    "ConfigurationError",
    "UnknownColorError",
    "ColorNameTypeError",
    "DASHES",
    "FONTS",
    "LAYOUT",
    "PALETTE",
]

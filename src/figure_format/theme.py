"""Pure data: palette, dash patterns, fonts, and layout constants.

No library imports. Colors are given by name and resolved against the color
table in colors.py; sizes are in screen pixels and converted to points at
the figure dpi when applied.
"""

# Line colors in the order they are assigned; repeats once exhausted
PALETTE = [
    "RoyalBlue1",
    "black",
    "red",
    "forest green",
    "goldenrod",
    "purple",
    "HotPink1",
]

# Line dash patterns (matplotlib linestyle strings); repeats independently
DASHES = ["-", "--", ":", "-."]

# Gray used for labels, legend text, spines and ticks
MUTED_RGB255 = (75, 75, 75)

BACKGROUND = "white"

# Primary display font first; matplotlib falls through the list
FONTS = {
    "display": ["Century Gothic", "Futura", "Avenir", "DejaVu Sans", "sans-serif"],
    "body": ["Verdana", "DejaVu Sans", "sans-serif"],
}

LAYOUT = {
    "figure_px": (750, 500),
    "window_origin_px": (10, 90),   # left margin, room for the menu bar
    "line_width": 2.0,
    "label_px": 16,
    "title_px": 18,
    "label_weight": "bold",
    "tick_px": 13,
    "axis_line_width": 1.0,
    "legend_px": 8,
    "legend_weight": "light",
    "legend_line_width": 1.5,
    "legend_loc": "best",
}

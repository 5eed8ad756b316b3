"""Walk open figures and restyle them in place.

Call :func:`figure_format` once, after all plotting and labeling is done::

    fig, ax = plt.subplots()
    ax.plot(x, y, label="data 1")
    ax.plot(x, y2, label="data 2")
    ax.set_title("title")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.legend()

    figure_format()

Figures, axes, lines and texts are visited in creation order, so line colors
and dash patterns follow the order the lines were plotted in. Anything drawn
after the call is left alone.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import Collection
from matplotlib.figure import Figure
from matplotlib.legend import Legend
from matplotlib.text import Text

from .cycle import line_style
from .roles import Role, px_to_pt, resolve_role
from .style import Style, default_style

logger = logging.getLogger(__name__)

# matplotlib labels the axes it creates for colorbars with this
_COLORBAR_LABEL = "<colorbar>"


def figure_format() -> None:
    """Format every open pyplot figure with the default style."""
    format_figures()


def open_figures() -> list[Figure]:
    """Open pyplot figures in creation order.

    The figure that was current beforehand is made current again.
    """
    nums = sorted(plt.get_fignums())
    if not nums:
        return []
    current = plt.gcf()
    figures = [plt.figure(num) for num in nums]
    plt.figure(current.number)
    return figures


def format_figures(figures: Iterable[Figure] | None = None, style: Style | None = None) -> None:
    """Format ``figures`` (default: all open pyplot figures) in place."""
    style = style if style is not None else default_style()
    figures = open_figures() if figures is None else list(figures)
    if not figures:
        logger.debug("No open figures; nothing to format")
        return
    for fig in figures:
        format_figure(fig, style)
    logger.info("Formatted %d figure(s)", len(figures))


def format_figure(fig: Figure, style: Style) -> None:
    fig.set_facecolor(style.background)
    width, height = style.figure_px
    fig.set_size_inches(width / fig.dpi, height / fig.dpi, forward=True)
    place_window(fig, *style.window_origin_px)

    context = None
    for ax in iter_axes(fig):
        format_axes(ax, style)
        context = ax

    # figure-level texts have no axes; the last axes visited stands in
    for text in fig.texts:
        if text.get_text():
            format_text(text, style, context)
    for legend in fig.legends:
        format_legend(legend, style)

    normalize_opacity(fig)
    fig.canvas.draw_idle()


def place_window(fig: Figure, x: int, y: int) -> None:
    """Move the figure's GUI window to ``(x, y)`` px from the screen's top-left."""
    manager = fig.canvas.manager
    window = getattr(manager, "window", None)
    if window is None:
        logger.debug("Figure %s has no window to place", getattr(manager, "num", "?"))
        return
    if hasattr(window, "move"):  # Qt
        window.move(x, y)
    elif hasattr(window, "wm_geometry"):  # Tk
        window.wm_geometry(f"+{x}+{y}")
    else:
        logger.debug("Don't know how to move a %s window", type(window).__name__)


def iter_axes(fig: Figure) -> Iterator[Axes]:
    """Axes of ``fig`` in creation order, insets after their parent.

    Colorbar axes are skipped.
    """
    seen: set[int] = set()

    def visit(ax: Axes) -> Iterator[Axes]:
        if id(ax) in seen or ax.get_label() == _COLORBAR_LABEL:
            return
        seen.add(id(ax))
        yield ax
        for child in ax.child_axes:
            yield from visit(child)

    for ax in fig.axes:
        yield from visit(ax)


def axes_texts(ax: Axes) -> list[Text]:
    """Non-empty texts owned by ``ax``: title, axis labels, then ``ax.texts``."""
    texts = [ax.title, ax.xaxis.label, ax.yaxis.label]
    zaxis = getattr(ax, "zaxis", None)
    if zaxis is not None:
        texts.append(zaxis.label)
    texts.extend(ax.texts)
    return [t for t in texts if t.get_text()]


def format_axes(ax: Axes, style: Style) -> None:
    ax.grid(True)
    ax.autoscale(enable=True, axis="both", tight=True)

    lines = ax.get_lines()
    for ordinal, line in enumerate(lines, start=1):
        line_style(ordinal, style.palette, style.dashes, style.line_width).apply(line)
    logger.debug("Styled %d line(s) on %r", len(lines), ax)

    for text in axes_texts(ax):
        format_text(text, style, ax)

    legend = ax.get_legend()
    if legend is not None:
        format_legend(legend, style)

    format_ticks(ax, style)


def format_text(text: Text, style: Style, context_axes: Axes | None) -> Role:
    """Apply the treatment for ``text``'s role and return the role.

    ``context_axes`` decides 2D vs 3D when the role has to be guessed.
    """
    role = resolve_role(text, context_axes)
    treatment = style.treatments.get(role, style.treatments[Role.DEFAULT])
    treatment.apply(text, text.figure.dpi)
    return role


def format_legend(legend: Legend, style: Style) -> None:
    spec = style.legend
    size = px_to_pt(spec.size_px, legend.figure.dpi)
    texts = list(legend.get_texts())
    title = legend.get_title()
    if title.get_text():
        texts.append(title)
    for text in texts:
        text.set_color(spec.text_color)
        text.set_fontfamily(list(spec.family))
        text.set_fontweight(spec.weight)
        text.set_fontsize(size)
    legend.get_frame().set_linewidth(spec.line_width)
    # automatic placement is only available for axes legends
    if legend.isaxes:
        legend.set_loc(spec.loc)


def format_ticks(ax: Axes, style: Style) -> None:
    spec = style.axes
    ax.tick_params(
        axis="both",
        direction=spec.tick_direction,
        length=spec.tick_length,
        colors=spec.color,
        labelsize=px_to_pt(spec.tick_px, ax.figure.dpi),
        labelfontfamily=list(spec.family),
    )
    for spine in ax.spines.values():
        spine.set_color(spec.color)
        spine.set_linewidth(spec.line_width)


def normalize_opacity(fig: Figure) -> int:
    """Re-set alpha on fully opaque collections so they are redrawn.

    Returns the number of collections touched.
    """
    count = 0
    for artist in fig.findobj(Collection):
        if artist.get_alpha() == 1:
            artist.set_alpha(1.0)
            count += 1
    return count

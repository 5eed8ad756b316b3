"""Infer what a text object is for and pick its font treatment.

A role comes from, in order of preference:

1. an explicit tag set with :func:`tag_role` when the label was created,
2. the axes attribute that owns the text (``ax.title``, ``ax.xaxis.label``,
   ...),
3. the heuristic rule table below, which recognises labels from their
   rotation and alignment and uses the axes frame as a 2D/3D discriminator.

The rule table is kept as a pure function over :class:`TextRoleSignature` so
it can be tested without a figure.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from matplotlib.axes import Axes
from matplotlib.text import Text

logger = logging.getLogger(__name__)

_TAG_PREFIX = "figure_format:"


class Role(Enum):
    X_LABEL = "x-label"
    Y_LABEL = "y-label"
    Z_LABEL = "z-label"
    TITLE = "title"
    DEFAULT = "default"


class HAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(Enum):
    TOP = "top"
    CAP = "cap"
    CENTER = "center"
    BASELINE = "baseline"
    CENTER_BASELINE = "center_baseline"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class TextRoleSignature:
    """Rotation and alignment of a text, plus its axes' box mode.

    ``box_on`` False is read as a 3D plot.
    """

    rotation: float
    horizontal_align: HAlign
    vertical_align: VAlign
    box_on: bool


@dataclass(frozen=True)
class FontTreatment:
    color: tuple[float, float, float]
    family: tuple[str, ...]
    weight: str
    size_px: float

    def apply(self, text: Text, dpi: float) -> None:
        text.set_color(self.color)
        text.set_fontfamily(list(self.family))
        text.set_fontweight(self.weight)
        text.set_fontsize(px_to_pt(self.size_px, dpi))


def px_to_pt(px: float, dpi: float) -> float:
    return px * 72.0 / dpi


# (box_on, rotation, horizontal, vertical, role); first match wins
RULES: tuple[tuple[bool, float, HAlign, VAlign, Role], ...] = (
    (True, 0.0, HAlign.CENTER, VAlign.CAP, Role.X_LABEL),
    (True, 90.0, HAlign.CENTER, VAlign.BOTTOM, Role.Y_LABEL),
    (True, 0.0, HAlign.CENTER, VAlign.BOTTOM, Role.TITLE),
    (False, 0.0, HAlign.LEFT, VAlign.TOP, Role.X_LABEL),
    (False, 0.0, HAlign.RIGHT, VAlign.TOP, Role.Y_LABEL),
    (False, 90.0, HAlign.CENTER, VAlign.BOTTOM, Role.Z_LABEL),
    (False, 0.0, HAlign.CENTER, VAlign.BOTTOM, Role.TITLE),
)


def classify_role(signature: TextRoleSignature) -> Role:
    """Match ``signature`` against :data:`RULES`; ``Role.DEFAULT`` if none."""
    rotation = signature.rotation % 360.0
    for box_on, rot, halign, valign, role in RULES:
        if (
            signature.box_on == box_on
            and rotation == rot
            and signature.horizontal_align is halign
            and signature.vertical_align is valign
        ):
            return role
    return Role.DEFAULT


def classify(signature: TextRoleSignature, treatments: Mapping[Role, FontTreatment]) -> FontTreatment:
    """Font treatment for the role ``signature`` classifies as."""
    role = classify_role(signature)
    return treatments.get(role, treatments[Role.DEFAULT])


def box_on(ax: Axes) -> bool:
    """Whether the axes draws a box; 3D axes never do.

    Some matplotlib releases remove ``get_frame_on`` from 3D axes, so the
    projection is checked first.
    """
    if getattr(ax, "name", "") == "3d":
        return False
    get_frame_on = getattr(ax, "get_frame_on", None)
    if callable(get_frame_on) and not get_frame_on():
        return False
    return any(spine.get_visible() for spine in ax.spines.values())


def signature_of(text: Text, box: bool) -> TextRoleSignature:
    return TextRoleSignature(
        rotation=float(text.get_rotation()),
        horizontal_align=HAlign(text.get_horizontalalignment()),
        vertical_align=VAlign(text.get_verticalalignment()),
        box_on=box,
    )


def tag_role(text: Text, role: Role) -> Text:
    """Record ``role`` on ``text`` so the formatter does not have to guess.

    The tag is stored in the artist's gid.
    """
    text.set_gid(_TAG_PREFIX + role.value)
    return text


def tagged_role(text: Text) -> Role | None:
    gid = text.get_gid()
    if not isinstance(gid, str) or not gid.startswith(_TAG_PREFIX):
        return None
    try:
        return Role(gid[len(_TAG_PREFIX):])
    except ValueError:
        logger.warning("Ignoring unknown role tag %r on %r", gid, text)
        return None


def owned_role(text: Text, ax: Axes) -> Role | None:
    """Role implied by which axes attribute holds ``text``, if any."""
    if text is ax.title:
        return Role.TITLE
    if text is ax.xaxis.label:
        return Role.X_LABEL
    if text is ax.yaxis.label:
        return Role.Y_LABEL
    zaxis = getattr(ax, "zaxis", None)
    if zaxis is not None and text is zaxis.label:
        return Role.Z_LABEL
    return None


def resolve_role(text: Text, context_axes: Axes | None) -> Role:
    """Role for ``text``: tag, then ownership, then the rule table.

    ``context_axes`` supplies the 2D/3D discriminator for the rule table.
    With no axes the text is treated as 2D.
    """
    role = tagged_role(text)
    if role is not None:
        return role
    if context_axes is not None:
        role = owned_role(text, context_axes)
        if role is not None:
            return role
    box = box_on(context_axes) if context_axes is not None else True
    return classify_role(signature_of(text, box))

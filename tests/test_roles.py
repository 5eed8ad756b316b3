"""Tests for text role inference.

The rule table is exercised through TextRoleSignature directly; the
explicit-tag and axis-ownership paths need real matplotlib texts.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import pytest

from figure_format.roles import (
    RULES,
    FontTreatment,
    HAlign,
    Role,
    TextRoleSignature,
    VAlign,
    box_on,
    classify,
    classify_role,
    px_to_pt,
    resolve_role,
    signature_of,
    tag_role,
    tagged_role,
)

GRAY = (75 / 256, 75 / 256, 75 / 256)
LABEL = FontTreatment(GRAY, ("DejaVu Sans",), "bold", 16)
TITLE = FontTreatment(GRAY, ("DejaVu Sans",), "bold", 18)
TREATMENTS = {
    Role.X_LABEL: LABEL,
    Role.Y_LABEL: LABEL,
    Role.Z_LABEL: LABEL,
    Role.TITLE: TITLE,
    Role.DEFAULT: LABEL,
}


def sig(rotation: float, ha: str, va: str, box: bool) -> TextRoleSignature:
    return TextRoleSignature(rotation, HAlign(ha), VAlign(va), box)


class TestClassifyRole:
    @pytest.mark.parametrize(
        ("signature", "role"),
        [
            (sig(0, "center", "cap", True), Role.X_LABEL),
            (sig(90, "center", "bottom", True), Role.Y_LABEL),
            (sig(0, "center", "bottom", True), Role.TITLE),
            (sig(0, "left", "top", False), Role.X_LABEL),
            (sig(0, "right", "top", False), Role.Y_LABEL),
            (sig(90, "center", "bottom", False), Role.Z_LABEL),
            (sig(0, "center", "bottom", False), Role.TITLE),
        ],
    )
    def test_rule_table(self, signature: TextRoleSignature, role: Role) -> None:
        assert classify_role(signature) is role

    def test_every_rule_reachable(self) -> None:
        for box, rotation, halign, valign, role in RULES:
            assert classify_role(TextRoleSignature(rotation, halign, valign, box)) is role

    @pytest.mark.parametrize(
        "signature",
        [
            sig(45, "center", "bottom", True),
            sig(0, "left", "top", True),  # 3D x-label shape on a 2D axes
            sig(0, "center", "cap", False),  # 2D x-label shape on a 3D axes
            sig(0, "right", "baseline", True),
        ],
    )
    def test_unmatched_is_default(self, signature: TextRoleSignature) -> None:
        assert classify_role(signature) is Role.DEFAULT

    def test_rotation_normalized(self) -> None:
        assert classify_role(sig(450, "center", "bottom", True)) is Role.Y_LABEL

    def test_pure(self) -> None:
        """Same signature, same answer, regardless of call history."""
        s = sig(0, "center", "bottom", True)
        first = classify_role(s)
        classify_role(sig(90, "center", "bottom", False))
        assert classify_role(s) is first


class TestClassify:
    def test_x_label_gets_label_treatment(self) -> None:
        assert classify(sig(0, "center", "cap", True), TREATMENTS) == LABEL

    def test_title_gets_title_treatment(self) -> None:
        assert classify(sig(0, "center", "bottom", True), TREATMENTS).size_px == 18

    def test_missing_role_falls_back_to_default(self) -> None:
        treatments = {Role.DEFAULT: TITLE}
        assert classify(sig(0, "center", "cap", True), treatments) is TITLE


class TestMatplotlibTexts:
    def test_tag_round_trip(self) -> None:
        fig, ax = plt.subplots()
        text = tag_role(ax.text(0, 0, "note"), Role.Z_LABEL)
        assert tagged_role(text) is Role.Z_LABEL

    def test_untagged_and_foreign_gid(self) -> None:
        fig, ax = plt.subplots()
        text = ax.text(0, 0, "note")
        assert tagged_role(text) is None
        text.set_gid("something-else")
        assert tagged_role(text) is None

    def test_owned_labels_resolve_by_ownership(self) -> None:
        fig, ax = plt.subplots()
        ax.set_title("t")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        assert resolve_role(ax.title, ax) is Role.TITLE
        assert resolve_role(ax.xaxis.label, ax) is Role.X_LABEL
        assert resolve_role(ax.yaxis.label, ax) is Role.Y_LABEL

    def test_tag_beats_ownership(self) -> None:
        fig, ax = plt.subplots()
        ax.set_xlabel("x")
        tag_role(ax.xaxis.label, Role.TITLE)
        assert resolve_role(ax.xaxis.label, ax) is Role.TITLE

    def test_free_text_uses_heuristic(self) -> None:
        fig, ax = plt.subplots()
        text = ax.text(0.5, 0.5, "T", ha="center", va="bottom")
        assert resolve_role(text, ax) is Role.TITLE

    def test_signature_of_reads_alignment(self) -> None:
        fig, ax = plt.subplots()
        text = ax.text(0, 0, "y", rotation=90, ha="center", va="bottom")
        assert signature_of(text, True) == sig(90, "center", "bottom", True)

    def test_box_on_2d_and_3d(self) -> None:
        fig = plt.figure()
        ax2 = fig.add_subplot(1, 2, 1)
        ax3 = fig.add_subplot(1, 2, 2, projection="3d")
        assert box_on(ax2) is True
        assert box_on(ax3) is False

    def test_box_off_when_spines_hidden(self) -> None:
        fig, ax = plt.subplots()
        for spine in ax.spines.values():
            spine.set_visible(False)
        assert box_on(ax) is False
        ax.set_frame_on(False)
        assert box_on(ax) is False

    def test_apply_converts_pixels_to_points(self) -> None:
        fig, ax = plt.subplots(dpi=72)
        text = ax.text(0, 0, "x")
        LABEL.apply(text, fig.dpi)
        assert text.get_fontsize() == pytest.approx(16)
        assert text.get_fontweight() == "bold"
        assert px_to_pt(18, 144) == pytest.approx(9)

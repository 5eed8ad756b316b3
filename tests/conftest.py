from __future__ import annotations

from collections.abc import Iterator

import matplotlib

# Headless backend; must be selected before pyplot is imported anywhere
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures() -> Iterator[None]:
    """Every test starts and ends with no open figures."""
    plt.close("all")
    yield
    plt.close("all")

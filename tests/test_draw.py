"""
Smoke tests for the matplotlib drawings.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from space_module.draw import draw_edges, draw_grid
from space_module.errors import ErrorKind, IndexingError


class TestDraw:

  def test_grid_labels_every_cell(self) -> None:
    fig = draw_grid([3, 2])
    labels = sorted(int(t.get_text()) for t in fig.axes[0].texts)
    assert labels == list(range(6))
    plt.close(fig)

  def test_one_dimensional_grid(self) -> None:
    fig = draw_grid([4])
    assert len(fig.axes[0].texts) == 4
    plt.close(fig)

  def test_edges_labelled_by_directed_index(self) -> None:
    fig = draw_edges([2, 2])
    labels = sorted(int(t.get_text()) for t in fig.axes[0].texts if t.get_text())
    assert labels == list(range(8))
    plt.close(fig)

  def test_rejects_three_axes(self) -> None:
    with pytest.raises(IndexingError) as exc:
      draw_grid([2, 2, 2])
    assert exc.value.kind == ErrorKind.INVALID_SHAPE

from __future__ import annotations
from typing import Sequence

from .errors import ErrorKind, error
from .grid import Grid
from .edge import DirectedEdge


def _plane(shape: Sequence[int]):
  if not 1 <= len(shape) <= 2:
    raise error(ErrorKind.INVALID_SHAPE, f"can only draw 1-D or 2-D grids, got {tuple(shape)}")
  cols = shape[0]
  rows = shape[1] if len(shape) == 2 else 1
  return cols, rows


def _xy(pos: Sequence[int]):
  return pos[0], (pos[1] if len(pos) == 2 else 0)


def draw_grid(shape: Sequence[int], show: bool = False):
  """Label every cell of a 1-D or 2-D grid with its linear index."""
  import matplotlib.pyplot as plt

  cols, rows = _plane(shape)
  grid = Grid()
  fig, ax = plt.subplots(figsize=(max(cols, 1)*0.6 + 1, max(rows, 1)*0.6 + 1))

  for i, pos in enumerate(grid.positions(shape)):
    x, y = _xy(pos)
    ax.add_patch(plt.Rectangle((x - 0.5, y - 0.5), 1, 1, fill=False, lw=1))
    ax.text(x, y, str(i), ha="center", va="center")

  ax.set_xlim(-0.5, cols - 0.5)
  ax.set_ylim(-0.5, rows - 0.5)
  ax.set_aspect("equal")
  ax.axis("off")
  if show:
    plt.show()
  return fig


def draw_edges(shape: Sequence[int], show: bool = False):
  """Draw every directed edge of a 1-D or 2-D grid, labelled by index.

  Both orientations of an edge are bent to opposite sides so they stay
  apart.
  """
  import matplotlib.pyplot as plt

  cols, rows = _plane(shape)
  space = DirectedEdge()
  fig, ax = plt.subplots(figsize=(max(cols, 1)*1.5 + 1, max(rows, 1)*1.5 + 1))

  for pos in Grid().positions(shape):
    x, y = _xy(pos)
    ax.plot([x], [y], "o", color="black")

  for i, (base, axis, alt) in enumerate(space.positions(shape)):
    head = list(base)
    head[axis] = alt
    x0, y0 = _xy(base)
    x1, y1 = _xy(head)
    ax.annotate(
      "",
      xy=(x1, y1),
      xytext=(x0, y0),
      arrowprops=dict(arrowstyle="->", lw=1.0, connectionstyle="arc3,rad=0.2"),
    )
    # label sits on the side the arc bends to
    dx, dy = x1 - x0, y1 - y0
    ax.text((x0 + x1)/2 + 0.1*dy, (y0 + y1)/2 - 0.1*dx, str(i), ha="center", va="center", fontsize=7)

  ax.set_xlim(-0.5, cols - 0.5)
  ax.set_ylim(-0.5, rows - 0.5)
  ax.set_aspect("equal")
  ax.axis("off")
  if show:
    plt.show()
  return fig

"""Edges of the Hamming graph of a grid.

Two cells are joined when they differ in exactly one axis. An edge is
written ``(base, axis, alt)``: the cell ``base`` and the value ``alt`` that
replaces ``base[axis]`` at the other end.

Undirected edges are grouped by the axis that changes. Inside the block
of axis ``i`` the edge is flattened like a grid cell whose axis ``i``
digit is the ``Pair`` index of the two endpoint values::

  [(a, x), b, c]
  [a, (b, x), c]
  [a, b, (c, x)]
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Optional

from .config import SpaceConfig, DEFAULT_CONFIG, UNCHECKED
from .errors import ErrorKind, error
from .space import Space
from .pair import Pair
from . import flat_algebra as fa


@dataclass
class EdgePos:
  base: List[int]
  axis: int
  alt: int

  def __iter__(self):
    yield self.base
    yield self.axis
    yield self.alt


def axis_block(shape: Sequence[int], axis: int) -> int:
  prod = Pair(UNCHECKED).count(shape[axis])
  for j in range(len(shape)):
    if j != axis:
      prod *= shape[j]
  return prod


def axis_offset(shape: Sequence[int], axis: int) -> int:
  offset = 0
  for i in range(axis):
    offset += axis_block(shape, i)
  return offset


def check_edge(shape: Sequence[int], pos):
  base, axis, alt = pos
  fa.is_flat_compatible(shape, base)
  if not 0 <= axis < len(shape):
    raise error(ErrorKind.SHAPE_POSITION_MISMATCH, f"axis {axis} outside [0, {len(shape)})")
  if not 0 <= alt < shape[axis] or alt == base[axis]:
    raise error(
      ErrorKind.INVALID_COORDINATE,
      f"alternate value {alt} on axis {axis} must differ from {base[axis]} and lie in [0, {shape[axis]})",
    )


@dataclass(frozen=True)
class Edge(Space):
  """Undirected edges; ``to_pos`` always returns ``base[axis] < alt``."""

  config: SpaceConfig = DEFAULT_CONFIG

  def count(self, shape: Sequence[int]) -> int:
    if self.config.validate:
      fa.check_shape(shape)
    pair = Pair(UNCHECKED)
    total = 0
    prod = 1
    for d in shape:
      total = d*total + pair.count(d)*prod
      prod *= d
    return total

  def zero(self, shape: Sequence[int]) -> EdgePos:
    return self.to_pos(shape, 0)

  def to_index(self, shape: Sequence[int], pos) -> int:
    if self.config.validate:
      fa.check_shape(shape)
      check_edge(shape, pos)
    base, axis, alt = pos
    pair = Pair(UNCHECKED)
    lo, hi = min(base[axis], alt), max(base[axis], alt)
    index = 0
    for i in reversed(range(len(shape))):
      if i == axis:
        index = index*pair.count(shape[i]) + pair.to_index(shape[i], (lo, hi))
      else:
        index = index*shape[i] + base[i]
    return axis_offset(shape, axis) + index

  def to_pos(self, shape: Sequence[int], index: int, out: Optional[EdgePos] = None) -> EdgePos:
    self.check_index(shape, index)
    axis = 0
    block = axis_block(shape, axis)
    while index >= block:
      index -= block
      axis += 1
      block = axis_block(shape, axis)
    pair = Pair(UNCHECKED)
    radices = list(shape)
    radices[axis] = pair.count(shape[axis])
    if out is None:
      out = EdgePos([], 0, 0)
    base = fa.colex_inv(radices, index, out.base)
    lo, hi = pair.to_pos(shape[axis], base[axis])
    base[axis] = lo
    out.base = base
    out.axis = axis
    out.alt = hi
    return out


@dataclass(frozen=True)
class DirectedEdge(Space):
  """Oriented edges: index ``2*e`` runs upward along the axis, ``2*e + 1`` downward."""

  config: SpaceConfig = DEFAULT_CONFIG

  @property
  def edge(self) -> Edge:
    return Edge(self.config)

  def count(self, shape: Sequence[int]) -> int:
    return 2*self.edge.count(shape)

  def zero(self, shape: Sequence[int]) -> EdgePos:
    return self.to_pos(shape, 0)

  def to_index(self, shape: Sequence[int], pos) -> int:
    index = self.edge.to_index(shape, pos)
    base, axis, alt = pos
    if base[axis] > alt:
      return 2*index + 1
    return 2*index

  def to_pos(self, shape: Sequence[int], index: int, out: Optional[EdgePos] = None) -> EdgePos:
    self.check_index(shape, index)
    out = self.edge.to_pos(shape, index//2, out)
    if index % 2 == 1:
      out.base[out.axis], out.alt = out.alt, out.base[out.axis]
    return out

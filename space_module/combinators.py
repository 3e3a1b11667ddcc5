from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence, List, Optional

from .config import SpaceConfig, DEFAULT_CONFIG
from .errors import ErrorKind, error
from .space import Space
from . import flat_algebra as fa


@dataclass(frozen=True)
class SubspaceShape:
  outer: Any
  inner: Any

  def __iter__(self):
    yield self.outer
    yield self.inner


@dataclass
class SubspacePos:
  outer: Any
  inner: Any

  def __iter__(self):
    yield self.outer
    yield self.inner


@dataclass(frozen=True)
class Of(Space):
  """Homogeneous sequence of ``inner`` positions, one per slot shape.

  Slots are flattened like grid axes: slot 0 varies fastest and slot k
  has radix ``inner.count(shapes[k])``.
  """

  inner: Space
  config: SpaceConfig = DEFAULT_CONFIG

  def count(self, shapes: Sequence[Any]) -> int:
    res = 1
    for s in shapes:
      res *= self.inner.count(s)
    return res

  def zero(self, shapes: Sequence[Any]) -> List[Any]:
    return [self.inner.zero(s) for s in shapes]

  def to_index(self, shapes: Sequence[Any], pos: Sequence[Any]) -> int:
    if self.config.validate and len(pos) != len(shapes):
      raise error(
        ErrorKind.SHAPE_POSITION_MISMATCH,
        f"position has {len(pos)} slots, shape has {len(shapes)}",
      )
    res = 0
    for i in reversed(range(len(shapes))):
      res = res*self.inner.count(shapes[i]) + self.inner.to_index(shapes[i], pos[i])
    return res

  def to_pos(self, shapes: Sequence[Any], index: int, out: Optional[List[Any]] = None) -> List[Any]:
    self.check_index(shapes, index)
    out = fa.resize(out, len(shapes), None)
    stride = fa.get_col_major_stride([self.inner.count(s) for s in shapes])
    for i in reversed(range(len(shapes))):
      digit = index // stride[i]
      out[i] = self.inner.to_pos(shapes[i], digit, out[i])
      index -= digit*stride[i]
    return out


@dataclass(frozen=True)
class Subspace(Space):
  """Product of an ``outer`` space and an ``inner`` space, inner fastest."""

  outer: Space
  inner: Space
  config: SpaceConfig = DEFAULT_CONFIG

  def count(self, shape) -> int:
    a, b = shape
    return self.outer.count(a)*self.inner.count(b)

  def zero(self, shape) -> SubspacePos:
    a, b = shape
    return SubspacePos(self.outer.zero(a), self.inner.zero(b))

  def to_index(self, shape, pos) -> int:
    a, b = shape
    pa, pb = pos
    return self.outer.to_index(a, pa)*self.inner.count(b) + self.inner.to_index(b, pb)

  def to_pos(self, shape, index: int, out: Optional[SubspacePos] = None) -> SubspacePos:
    self.check_index(shape, index)
    a, b = shape
    n = self.inner.count(b)
    x = index // n
    if out is None:
      return SubspacePos(self.outer.to_pos(a, x), self.inner.to_pos(b, index - x*n))
    out.outer = self.outer.to_pos(a, x, out.outer)
    out.inner = self.inner.to_pos(b, index - x*n, out.inner)
    return out

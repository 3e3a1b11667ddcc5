from __future__ import annotations
from dataclasses import dataclass
from math import factorial
from typing import Any, Sequence, List, Optional

from .config import SpaceConfig, DEFAULT_CONFIG
from .errors import ErrorKind, error
from .space import Space
from .combinators import Subspace
from . import flat_algebra as fa


def check_permutation(n: int, values: Sequence[int]):
  if len(values) != n:
    raise error(
      ErrorKind.SHAPE_POSITION_MISMATCH,
      f"permutation of {n} elements given {len(values)} entries",
    )
  seen = [False]*n
  for x in values:
    if not 0 <= x < n or seen[x]:
      raise error(ErrorKind.NOT_A_PERMUTATION, f"{list(values)} is not a permutation of range({n})")
    seen[x] = True


def rank(n: int, values: Sequence[int]) -> int:
  """Lehmer rank of a one-line permutation of ``range(n)``.

  Slots are read right to left. Slot k contributes its value less the
  number of smaller values to its left, weighted by the factorial base.
  """
  index = 0
  weight = 1
  for k in reversed(range(n)):
    x = values[k]
    lower = 0
    for j in range(k):
      if values[j] < x:
        lower += 1
    index += weight*(x - lower)
    weight *= n - k
  return index


def unrank(n: int, index: int, out: Optional[List[int]] = None) -> List[int]:
  # Unplaced values stay at the front; each pick is moved to the back.
  out = fa.resize(out, 0)
  out.extend(range(n))
  count = factorial(n)
  for i in range(n):
    block = count // (n - i)
    ind = index // block
    out.append(out.pop(ind))
    count = block
    index -= ind*block
  return out


@dataclass(frozen=True)
class Permutation(Space):
  """Orderings of ``n`` slots in one-line notation, ranked by Lehmer code."""

  config: SpaceConfig = DEFAULT_CONFIG

  @staticmethod
  def of(inner: Space, config: SpaceConfig = DEFAULT_CONFIG) -> "PermutationOf":
    return PermutationOf(inner, config)

  @staticmethod
  def subspace(inner: Space, config: SpaceConfig = DEFAULT_CONFIG) -> Subspace:
    return Subspace(Permutation(config), inner, config)

  def count(self, n: int) -> int:
    if self.config.validate:
      fa.check_size(n)
    return factorial(n)

  def zero(self, n: int) -> List[int]:
    if self.config.validate:
      fa.check_size(n)
    return list(range(n))

  def to_index(self, n: int, pos: Sequence[int]) -> int:
    if self.config.validate:
      fa.check_size(n)
      check_permutation(n, pos)
    return rank(n, pos)

  def to_pos(self, n: int, index: int, out: Optional[List[int]] = None) -> List[int]:
    self.check_index(n, index)
    return unrank(n, index, out)


@dataclass(frozen=True)
class PermutationOf(Space):
  """Orderings of every position of ``inner`` for one inner shape.

  Elements are compared through ``inner.to_index``, so any space can be
  permuted, not only raw integers.
  """

  inner: Space
  config: SpaceConfig = DEFAULT_CONFIG

  def count(self, shape) -> int:
    return factorial(self.inner.count(shape))

  def zero(self, shape) -> List[Any]:
    return [self.inner.to_pos(shape, j) for j in range(self.inner.count(shape))]

  def to_index(self, shape, pos: Sequence[Any]) -> int:
    n = self.inner.count(shape)
    values = [self.inner.to_index(shape, p) for p in pos]
    if self.config.validate:
      check_permutation(n, values)
    return rank(n, values)

  def to_pos(self, shape, index: int, out: Optional[List[Any]] = None) -> List[Any]:
    self.check_index(shape, index)
    n = self.inner.count(shape)
    order = unrank(n, index)
    out = fa.resize(out, n, None)
    for i in range(n):
      out[i] = self.inner.to_pos(shape, order[i], out[i])
    return out

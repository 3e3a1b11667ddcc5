from __future__ import annotations
from dataclasses import dataclass
from math import isqrt
from typing import Sequence, Tuple, Optional

from .config import SpaceConfig, DEFAULT_CONFIG, UNCHECKED
from .errors import ErrorKind, error
from .space import Space
from . import flat_algebra as fa


@dataclass(frozen=True)
class Pair(Space):
  """Unordered pairs ``(a, b)`` with ``a < b < n``, in triangular order.

  ``(0, 1) -> 0``, ``(0, 2) -> 1``, ``(1, 2) -> 2``, ``(0, 3) -> 3``, ...
  """

  config: SpaceConfig = DEFAULT_CONFIG

  def count(self, n: int) -> int:
    if self.config.validate:
      fa.check_size(n)
    return n*(n - 1)//2

  def zero(self, n: int) -> Tuple[int, int]:
    return (0, 1)

  def to_index(self, n: int, pos: Sequence[int]) -> int:
    a, b = pos
    if self.config.validate and not 0 <= a < b < n:
      raise error(ErrorKind.INVALID_COORDINATE, f"{tuple(pos)} is not an increasing pair below {n}")
    return a + b*(b - 1)//2

  def to_pos(self, n: int, index: int, out: Optional[Tuple[int, int]] = None) -> Tuple[int, int]:
    self.check_index(n, index)
    # largest b with b*(b-1)/2 <= index
    b = (isqrt(8*index + 1) + 1)//2
    return (index - b*(b - 1)//2, b)


@dataclass(frozen=True)
class NeqPair(Space):
  """Ordered pairs of distinct values below ``n``; count is ``n*(n-1)``.

  Each unordered pair occupies two adjacent indices, ascending first.
  """

  config: SpaceConfig = DEFAULT_CONFIG

  def count(self, n: int) -> int:
    if self.config.validate:
      fa.check_size(n)
    return n*(n - 1)

  def zero(self, n: int) -> Tuple[int, int]:
    return (0, 1)

  def to_index(self, n: int, pos: Sequence[int]) -> int:
    a, b = pos
    if self.config.validate and not (0 <= a < n and 0 <= b < n and a != b):
      raise error(ErrorKind.INVALID_COORDINATE, f"{tuple(pos)} is not a pair of distinct values below {n}")
    pair = Pair(UNCHECKED)
    if a < b:
      return 2*pair.to_index(n, (a, b))
    return 2*pair.to_index(n, (b, a)) + 1

  def to_pos(self, n: int, index: int, out: Optional[Tuple[int, int]] = None) -> Tuple[int, int]:
    self.check_index(n, index)
    a, b = Pair(UNCHECKED).to_pos(n, index//2)
    if index % 2 == 1:
      return (b, a)
    return (a, b)

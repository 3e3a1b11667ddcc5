from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, List, Optional

from .config import SpaceConfig, DEFAULT_CONFIG
from .space import Space
from .combinators import Of, Subspace
from . import flat_algebra as fa


@dataclass(frozen=True)
class Grid(Space):
  """Rectangular N-dimensional grid; shape is one size per axis.

  ``[3, 3]`` holds 9 cells and ``[0, 1]`` maps to 3, since axis 0 has
  stride 1. The empty shape has a single position, ``[]``.
  """

  config: SpaceConfig = DEFAULT_CONFIG

  @staticmethod
  def of(inner: Space, config: SpaceConfig = DEFAULT_CONFIG) -> Of:
    return Of(inner, config)

  @staticmethod
  def subspace(inner: Space, config: SpaceConfig = DEFAULT_CONFIG) -> Subspace:
    return Subspace(Grid(config), inner, config)

  def count(self, shape: Sequence[int]) -> int:
    if self.config.validate:
      fa.check_shape(shape)
    return fa.size(shape)

  def zero(self, shape: Sequence[int]) -> List[int]:
    if self.config.validate:
      fa.check_shape(shape)
    return [0]*len(shape)

  def to_index(self, shape: Sequence[int], pos: Sequence[int]) -> int:
    if self.config.validate:
      fa.check_shape(shape)
      fa.is_flat_compatible(shape, pos)
    return fa.colex(shape, pos)

  def to_pos(self, shape: Sequence[int], index: int, out: Optional[List[int]] = None) -> List[int]:
    self.check_index(shape, index)
    return fa.colex_inv(shape, index, out)

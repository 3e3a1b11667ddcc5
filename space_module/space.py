from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from .config import SpaceConfig
from .errors import ErrorKind, error

logger = logging.getLogger(__name__)


class Space(ABC):
  """Four-operation contract every index space implements.

  A space bijects the positions of a shape onto ``[0, count(shape))``.
  ``to_pos`` may be handed a caller-owned ``out`` buffer; spaces whose
  positions are mutable (lists, position records) resize and refill it
  and return it, spaces with immutable positions ignore it.

  Concrete spaces are frozen dataclasses whose only data is their
  ``config`` and the spaces they wrap.
  """

  config: SpaceConfig

  @abstractmethod
  def count(self, shape) -> int:
    ...

  @abstractmethod
  def zero(self, shape) -> Any:
    ...

  @abstractmethod
  def to_index(self, shape, pos) -> int:
    ...

  @abstractmethod
  def to_pos(self, shape, index: int, out: Optional[Any] = None) -> Any:
    ...

  def positions(self, shape) -> Iterator[Any]:
    n = self.count(shape)
    logger.debug("enumerating %d positions of %r for shape %r", n, self, shape)
    for i in range(n):
      yield self.to_pos(shape, i)

  def check_index(self, shape, index: int):
    if not self.config.validate:
      return
    n = self.count(shape)
    if not 0 <= index < n:
      raise error(ErrorKind.OUT_OF_RANGE_INDEX, f"index {index} outside [0, {n}) for shape {shape!r}")

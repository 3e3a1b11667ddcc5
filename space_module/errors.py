from __future__ import annotations
import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
  OUT_OF_RANGE_INDEX = auto()
  SHAPE_POSITION_MISMATCH = auto()
  NOT_A_PERMUTATION = auto()
  INVALID_COORDINATE = auto()
  INVALID_SHAPE = auto()

  def __repr__(self) -> str:
    return self.name


class IndexingError(ValueError):
  """A caller passed a shape, position or index outside a space's contract."""

  def __init__(self, kind: ErrorKind, message: str):
    super().__init__(f"{kind.name}: {message}")
    self.kind = kind


def error(kind: ErrorKind, message: str) -> IndexingError:
  logger.debug("rejecting call: %s: %s", kind.name, message)
  return IndexingError(kind, message)

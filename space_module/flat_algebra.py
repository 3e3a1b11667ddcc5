from __future__ import annotations
from typing import Sequence, Tuple, List, Optional
from functools import reduce
from operator import mul

from .errors import ErrorKind, error


def get_col_major_stride(shape: Sequence[int]) -> Tuple[int, ...]:
  col_major = [1]
  for i in range(1, len(shape)):
    col_major.append(col_major[i-1]*shape[i-1])
  return tuple(col_major)


def size(shape: Sequence[int]) -> int:
  return reduce(mul, shape, 1)


def resize(out: Optional[list], n: int, fill=0) -> list:
  """Truncate or pad a caller-owned buffer to exactly ``n`` entries."""
  if out is None:
    return [fill]*n
  del out[n:]
  if len(out) < n:
    out.extend([fill]*(n - len(out)))
  return out


def check_shape(shape: Sequence[int]):
  for i, s in enumerate(shape):
    if s < 0:
      raise error(ErrorKind.INVALID_SHAPE, f"axis {i} of {tuple(shape)} has negative size {s}")


def check_size(n: int):
  if n < 0:
    raise error(ErrorKind.INVALID_SHAPE, f"size {n} is negative")


def is_flat_compatible(shape: Sequence[int], co_ordinates: Sequence[int]):
  if len(shape) != len(co_ordinates):
    raise error(
      ErrorKind.SHAPE_POSITION_MISMATCH,
      f"position {tuple(co_ordinates)} has {len(co_ordinates)} axes, shape {tuple(shape)} has {len(shape)}",
    )
  for i in range(len(shape)):
    if not 0 <= co_ordinates[i] < shape[i]:
      raise error(
        ErrorKind.INVALID_COORDINATE,
        f"coordinate {co_ordinates[i]} on axis {i} outside [0, {shape[i]})",
      )


def colex(shape: Sequence[int], co_ordinates: Sequence[int]) -> int:
  # axis 0 varies fastest
  res = 0
  for i in reversed(range(len(shape))):
    res = res*shape[i] + co_ordinates[i]
  return res


def colex_inv(shape: Sequence[int], idx: int, out: Optional[List[int]] = None) -> List[int]:
  out = resize(out, len(shape))
  cs_stride = get_col_major_stride(shape)
  for i in reversed(range(len(shape))):
    digit = idx // cs_stride[i]
    out[i] = digit
    idx -= digit*cs_stride[i]
  return out

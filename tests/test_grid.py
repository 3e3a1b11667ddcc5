"""
Tests for grid flattening.
"""

import pytest

from space_module.config import UNCHECKED
from space_module.errors import ErrorKind, IndexingError
from space_module.grid import Grid
from space_module import flat_algebra as fa


class TestGrid:
  """Literal values and round trips for Grid."""

  def test_square_literals(self) -> None:
    grid = Grid()
    shape = [3, 3]
    assert grid.count(shape) == 9
    assert grid.to_index(shape, [0, 0]) == 0
    assert grid.to_index(shape, [1, 0]) == 1
    assert grid.to_index(shape, [0, 1]) == 3
    assert grid.to_pos(shape, 3) == [0, 1]

  def test_zero(self) -> None:
    assert Grid().zero([4, 2, 5]) == [0, 0, 0]
    assert Grid().to_pos([4, 2, 5], 0) == Grid().zero([4, 2, 5])

  def test_empty_shape_has_one_position(self) -> None:
    grid = Grid()
    assert grid.count([]) == 1
    assert grid.zero([]) == []
    assert grid.to_pos([], 0) == []
    assert grid.to_index([], []) == 0

  def test_zero_axis_is_empty(self) -> None:
    assert Grid().count([3, 0, 2]) == 0
    assert list(Grid().positions([3, 0])) == []

  @pytest.mark.parametrize("shape", [[5], [2, 3], [3, 1, 4], [2, 2, 2, 2]])
  def test_round_trip(self, shape) -> None:
    grid = Grid()
    seen = set()
    for i in range(grid.count(shape)):
      pos = grid.to_pos(shape, i)
      assert len(pos) == len(shape)
      assert grid.to_index(shape, pos) == i
      seen.add(tuple(pos))
    assert len(seen) == grid.count(shape)

  def test_positions_in_index_order(self) -> None:
    assert list(Grid().positions([2, 2])) == [[0, 0], [1, 0], [0, 1], [1, 1]]

  def test_out_buffer_is_resized(self) -> None:
    out = [9, 9, 9, 9, 9]
    res = Grid().to_pos([2, 3], 5, out)
    assert res is out
    assert out == [1, 2]
    short = []
    Grid().to_pos([2, 3, 4], 23, short)
    assert short == [1, 2, 3]


class TestGridErrors:
  """Contract violations are reported with their kind."""

  def test_index_out_of_range(self) -> None:
    with pytest.raises(IndexingError) as exc:
      Grid().to_pos([3, 3], 9)
    assert exc.value.kind == ErrorKind.OUT_OF_RANGE_INDEX
    with pytest.raises(IndexingError):
      Grid().to_pos([3, 3], -1)

  def test_axis_count_mismatch(self) -> None:
    with pytest.raises(IndexingError) as exc:
      Grid().to_index([3, 3], [0, 0, 0])
    assert exc.value.kind == ErrorKind.SHAPE_POSITION_MISMATCH

  def test_coordinate_out_of_range(self) -> None:
    with pytest.raises(IndexingError) as exc:
      Grid().to_index([3, 3], [3, 0])
    assert exc.value.kind == ErrorKind.INVALID_COORDINATE

  def test_negative_axis(self) -> None:
    with pytest.raises(IndexingError) as exc:
      Grid().count([2, -1])
    assert exc.value.kind == ErrorKind.INVALID_SHAPE

  def test_unchecked_skips_validation(self) -> None:
    # Out-of-range coordinates are simply folded into the arithmetic.
    assert Grid(UNCHECKED).to_index([3, 3], [4, 0]) == 4


class TestFlatAlgebra:

  def test_col_major_stride(self) -> None:
    assert fa.get_col_major_stride((2, 3, 4)) == (1, 2, 6)
    assert fa.get_col_major_stride(()) == (1,)

  def test_colex_matches_strides(self) -> None:
    shape = (2, 3, 4)
    stride = fa.get_col_major_stride(shape)
    coords = (1, 2, 3)
    assert fa.colex(shape, coords) == sum(s*c for s, c in zip(stride, coords))

  def test_resize(self) -> None:
    assert fa.resize(None, 3) == [0, 0, 0]
    buf = [1, 2, 3, 4]
    assert fa.resize(buf, 2) is buf
    assert buf == [1, 2]

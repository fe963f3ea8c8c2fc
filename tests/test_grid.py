"""Unit tests for ForestGrid and neighbour lookup."""

import numpy as np
import pytest

from fire_spread.cell import CellState
from fire_spread.exceptions import FireSpreadError, IndexOutOfRangeError, InvalidDimensionError
from fire_spread.grid import ForestGrid, neighbour_indices

E, T, B = CellState.Empty, CellState.Tree, CellState.Burning


class TestForestGridCreation:
    """Test cases for building grids."""

    def test_default_is_all_trees(self, sample_grid_size):
        """Test that a new grid starts as trees."""
        width, height = sample_grid_size
        grid = ForestGrid(width, height)
        assert grid.width == width
        assert grid.height == height
        assert len(grid) == width * height
        assert all(state is T for state in grid)

    def test_initial_state(self):
        """Test creating a grid filled with another state."""
        grid = ForestGrid(4, 2, CellState.Empty)
        assert grid.cells == (E,) * 8

    @pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3), (3, -2)])
    def test_invalid_dimensions(self, width, height):
        """Test that non-positive sizes are rejected."""
        with pytest.raises(InvalidDimensionError) as exc_info:
            ForestGrid(width, height)
        assert exc_info.value.details == {"width": width, "height": height}

    def test_invalid_dimension_is_value_error(self):
        with pytest.raises(ValueError):
            ForestGrid(0, 0)

    def test_from_states(self):
        """Test building a grid from explicit states."""
        grid = ForestGrid.from_states(3, 2, [T, E, B, B, E, T])
        assert grid.get(0) is T
        assert grid.get(2) is B
        assert grid.get(4) is E
        assert grid.cells == (T, E, B, B, E, T)

    def test_from_states_wrong_length(self):
        with pytest.raises(InvalidDimensionError):
            ForestGrid.from_states(2, 2, [T, T, T])


class TestForestGridAccess:
    """Test cases for indexed access and mutation."""

    @pytest.fixture
    def grid(self):
        return ForestGrid(3, 3)

    def test_set_and_get(self, grid):
        grid.set(4, B)
        assert grid.get(4) is B
        assert grid.get(3) is T

    def test_row_major_indexing(self):
        """Test that index = x + y * width."""
        grid = ForestGrid(4, 3, CellState.Empty)
        x, y = 3, 1
        grid.set(x + y * 4, B)
        assert grid.as_array()[y, x] == B.value

    @pytest.mark.parametrize("index", [-1, 9, 100])
    def test_get_out_of_range(self, grid, index):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            grid.get(index)
        assert exc_info.value.index == index
        assert exc_info.value.size == 9

    @pytest.mark.parametrize("index", [-1, 9])
    def test_set_out_of_range(self, grid, index):
        with pytest.raises(IndexOutOfRangeError):
            grid.set(index, B)
        assert grid.cells == (T,) * 9

    def test_index_error_hierarchy(self, grid):
        with pytest.raises(IndexError):
            grid.get(9)
        with pytest.raises(FireSpreadError):
            grid.get(9)

    def test_is_valid_index(self, grid):
        assert grid.is_valid_index(0)
        assert grid.is_valid_index(8)
        assert not grid.is_valid_index(-1)
        assert not grid.is_valid_index(9)

    def test_fill(self, grid):
        grid.set(0, B)
        grid.set(1, E)
        grid.fill(T)
        assert grid.cells == (T,) * 9

    def test_copy_is_independent(self, grid):
        clone = grid.copy()
        clone.set(0, B)
        assert grid.get(0) is T
        assert clone == ForestGrid.from_states(3, 3, [B] + [T] * 8)

    def test_as_array_is_read_only_copy(self, grid):
        array = grid.as_array()
        assert array.shape == (3, 3)
        with pytest.raises(ValueError):
            array[0, 0] = B.value
        grid.set(0, B)
        assert array[0, 0] == T.value

    def test_equality(self):
        assert ForestGrid(2, 3) == ForestGrid(2, 3)
        assert ForestGrid(2, 3) != ForestGrid(3, 2)
        assert ForestGrid(2, 2) != ForestGrid(2, 2, CellState.Empty)


class TestNeighbourIndices:
    """Test cases for edge handling in the Moore neighbourhood."""

    def test_top_left_corner(self):
        """Test the top-left corner only sees E, S and SE."""
        assert sorted(neighbour_indices(0, 3, 3)) == [1, 3, 4]

    def test_top_right_corner(self):
        assert sorted(neighbour_indices(2, 3, 3)) == [1, 4, 5]

    def test_bottom_left_corner(self):
        assert sorted(neighbour_indices(6, 3, 3)) == [3, 4, 7]

    def test_bottom_right_corner(self):
        assert sorted(neighbour_indices(8, 3, 3)) == [4, 5, 7]

    def test_centre_order(self):
        """Test the full neighbourhood is listed N, NE, E, SE, S, SW, W, NW."""
        assert neighbour_indices(4, 3, 3) == [1, 2, 5, 8, 7, 6, 3, 0]

    def test_edges(self):
        assert sorted(neighbour_indices(1, 3, 3)) == [0, 2, 3, 4, 5]
        assert sorted(neighbour_indices(3, 3, 3)) == [0, 1, 4, 6, 7]
        assert sorted(neighbour_indices(5, 3, 3)) == [1, 2, 4, 7, 8]
        assert sorted(neighbour_indices(7, 3, 3)) == [3, 4, 5, 6, 8]

    def test_no_wrap_between_rows(self):
        """Test a right-edge cell does not see the next row's first cell."""
        # 4x4: index 3 is the top-right corner, index 4 starts the next row
        assert 4 not in neighbour_indices(3, 4, 4)
        assert 3 not in neighbour_indices(4, 4, 4)

    def test_single_cell_grid(self):
        assert neighbour_indices(0, 1, 1) == []

    def test_single_row(self):
        assert sorted(neighbour_indices(2, 5, 1)) == [1, 3]

    def test_single_column(self):
        assert sorted(neighbour_indices(2, 1, 5)) == [1, 3]

    @pytest.mark.parametrize("width, height", [(1, 1), (1, 4), (4, 1), (3, 3), (7, 5), (75, 75)])
    def test_never_out_of_range(self, width, height):
        """Test that no cell ever reads outside the grid."""
        size = width * height
        for index in range(size):
            neighbours = neighbour_indices(index, width, height)
            assert all(0 <= n < size for n in neighbours)
            assert index not in neighbours
            assert len(neighbours) == len(set(neighbours))

    def test_matches_coordinate_neighbourhood(self):
        """Test the index rule against a coordinate-based reference."""
        width, height = 6, 4
        for index in range(width * height):
            x, y = index % width, index // width
            expected = {
                nx + ny * width
                for nx in range(x - 1, x + 2)
                for ny in range(y - 1, y + 2)
                if (nx, ny) != (x, y) and 0 <= nx < width and 0 <= ny < height
            }
            assert set(neighbour_indices(index, width, height)) == expected

"""Unit tests for pointer position to cell index mapping."""

import pytest

from fire_spread.coordinates_transform import point_to_index


class TestPointToIndex:
    """Test cases for point_to_index."""

    def test_origin(self):
        assert point_to_index(0, 0, 600, 600, 75, 75) == 0

    def test_last_cell(self):
        assert point_to_index(599.9, 599.9, 600, 600, 75, 75) == 75 * 75 - 1

    def test_row_major(self):
        # 10x5 grid drawn on 100x50 pixels: 10 pixels per cell
        assert point_to_index(35, 22, 100, 50, 10, 5) == 3 + 2 * 10

    def test_non_square_rendering(self):
        # Cells are 20 pixels wide and 4 pixels high
        assert point_to_index(59, 7, 200, 20, 10, 5) == 2 + 1 * 10

    def test_fractional_positions_floor(self):
        assert point_to_index(9.999, 9.999, 100, 100, 10, 10) == 0
        assert point_to_index(10.0, 10.0, 100, 100, 10, 10) == 11

    def test_right_edge_of_area_leaves_the_row(self):
        """Test that the formula itself does not clamp columns."""
        assert point_to_index(100, 0, 100, 100, 10, 10) == 10

    def test_outside_area_can_be_out_of_range(self):
        assert point_to_index(-1, -1, 100, 100, 10, 10) < 0
        assert point_to_index(50, 100, 100, 100, 10, 10) >= 100

    @pytest.mark.parametrize("width, height", [(0, 100), (100, 0), (-1, 100)])
    def test_non_positive_rendered_size(self, width, height):
        assert point_to_index(5, 5, width, height, 10, 10) is None

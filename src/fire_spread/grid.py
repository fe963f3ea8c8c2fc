"""Row-major storage for the forest grid."""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from .cell import CellState
from .exceptions import IndexOutOfRangeError, InvalidDimensionError


def neighbour_indices(index: int, width: int, height: int) -> list[int]:
    """
    Return the in-bounds Moore neighbourhood of a cell.

    Neighbours are listed in the order N, NE, E, SE, S, SW, W, NW. The grid
    does not wrap: edges are detected from the row-major index alone and the
    neighbours on the far side of an edge are left out.

    Args:
        index: Row-major index of the cell (x + y * width)
        width: Grid width in cells
        height: Grid height in cells

    Returns:
        Indices of the neighbours that lie inside the grid
    """
    size = width * height
    top = index < width
    bottom = index + width >= size
    left = index % width == 0
    right = (index + 1) % width == 0

    candidates = (
        (index - width, not top),
        (index - width + 1, not (top or right)),
        (index + 1, not right),
        (index + width + 1, not (bottom or right)),
        (index + width, not bottom),
        (index + width - 1, not (bottom or left)),
        (index - 1, not left),
        (index - width - 1, not (top or left)),
    )
    # Anything that slipped past edge detection counts as "no neighbour"
    return [n for n, inside in candidates if inside and 0 <= n < size]


class ForestGrid:
    """Fixed-size grid of cell states stored in row-major order.

    The grid only stores states; all transition logic lives in the model.
    """

    def __init__(self, width: int, height: int, initial_state: CellState = CellState.Tree):
        """
        Initialize a grid filled with a single state.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            initial_state: State every cell starts in
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensionError(width, height)
        self._width = width
        self._height = height
        self._cells = np.full(width * height, CellState(initial_state).value, dtype=np.int8)

    @classmethod
    def from_states(cls, width: int, height: int, states: Iterable[CellState]) -> "ForestGrid":
        """Build a grid from an explicit row-major sequence of states."""
        grid = cls(width, height, CellState.Empty)
        values = [CellState(state).value for state in states]
        if len(values) != grid.size:
            raise InvalidDimensionError(
                width,
                height,
                message=f"Expected {grid.size} states for a {width}x{height} grid, got {len(values)}",
            )
        grid._cells[:] = values
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    @property
    def cells(self) -> tuple[CellState, ...]:
        """Snapshot of all cell states in row-major order."""
        return tuple(CellState(value) for value in self._cells.tolist())

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.size

    def _check_index(self, index: int) -> None:
        if not self.is_valid_index(index):
            raise IndexOutOfRangeError(index, self.size)

    def get(self, index: int) -> CellState:
        self._check_index(index)
        return CellState(int(self._cells[index]))

    def set(self, index: int, state: CellState) -> None:
        self._check_index(index)
        self._cells[index] = CellState(state).value

    def fill(self, state: CellState) -> None:
        self._cells.fill(CellState(state).value)

    def copy(self) -> "ForestGrid":
        other = ForestGrid(self._width, self._height, CellState.Empty)
        other._cells[:] = self._cells
        return other

    def as_array(self) -> np.ndarray:
        """
        Return the states as a (height, width) array of CellState values.

        The array is a read-only copy, so renderers can hold on to it while
        the model moves on.
        """
        array = self._cells.reshape(self._height, self._width).copy()
        array.flags.writeable = False
        return array

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[CellState]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForestGrid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and bool(np.array_equal(self._cells, other._cells))
        )

    def __repr__(self) -> str:
        return f"ForestGrid(width={self._width}, height={self._height})"

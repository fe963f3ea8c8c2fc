from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from .cell import CellState

if TYPE_CHECKING:
    from .grid import ForestGrid


@dataclass(frozen=True)
class StateCounts:
    """Number of cells in each state for one grid."""

    empty: int
    trees: int
    burning: int

    @property
    def total(self) -> int:
        return self.empty + self.trees + self.burning

    @property
    def tree_density(self) -> float:
        # Share of the grid covered by trees
        return _safe_div(self.trees, self.total)

    @property
    def is_burning(self) -> bool:
        return self.burning > 0


def _safe_div(num: float, den: float) -> float:
    return 0.0 if den == 0 else float(num) / float(den)


def count_states(grid: "ForestGrid") -> StateCounts:
    """Count the cells of a grid by state."""

    values = np.asarray(grid.as_array(), dtype=np.int64).ravel()
    counts = np.bincount(values, minlength=len(CellState))
    return StateCounts(
        empty=int(counts[CellState.Empty.value]),
        trees=int(counts[CellState.Tree.value]),
        burning=int(counts[CellState.Burning.value]),
    )

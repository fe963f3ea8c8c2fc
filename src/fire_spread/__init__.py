"""
Forest Fire Simulation using Cellular Automata.

A stochastic cellular automaton where trees regrow on empty ground, catch
fire from burning neighbours or from lightning, and burn out in one step.
"""

from .cell import CellState
from .coordinates_transform import point_to_index
from .exceptions import FireSpreadError, IndexOutOfRangeError, InvalidDimensionError
from .grid import ForestGrid, neighbour_indices
from .metrics import StateCounts, count_states
from .model import FireModel
from .scheduler import StepScheduler

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "ForestGrid",
    "neighbour_indices",
    "FireModel",
    "StepScheduler",
    "StateCounts",
    "count_states",
    "point_to_index",
    "FireSpreadError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
]

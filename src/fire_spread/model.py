"""Forest fire model implementation."""

from __future__ import annotations

import logging
import numbers
import threading
from typing import Callable, Optional

from mesa import Model

from . import constants
from .cell import CellState
from .coordinates_transform import point_to_index
from .grid import ForestGrid, neighbour_indices
from .metrics import count_states

logger = logging.getLogger(__name__)

StateListener = Callable[["FireModel", str], None]


class FireModel(Model):
    """Forest fire cellular automaton with regrowth and lightning.

    Every cell is Empty, Tree or Burning. One transition computes the next
    state of every cell from the current grid and swaps the result in:

    - an Empty cell regrows into a Tree with ``regrowth_probability`` percent,
    - a Tree next to a Burning cell catches fire, otherwise it is struck by
      lightning with ``lightning_probability`` percent,
    - a Burning cell burns out and becomes Empty.

    The model does not schedule itself. ``start``/``stop`` only flip the
    ``running`` flag and tell the listeners; a scheduler calls ``tick``
    every ``step_interval_ms`` while the model is running.
    """

    def __init__(
        self,
        width: int = constants.FOREST_WIDTH,
        height: int = constants.FOREST_HEIGHT,
        regrowth_probability: int = constants.DEFAULT_PROBABILITY,
        lightning_probability: int = constants.DEFAULT_PROBABILITY,
        step_interval_ms: int = constants.DEFAULT_STEP_INTERVAL_MS,
        *,
        seed: Optional[int] = None,
    ):
        """
        Initialize the forest fire model.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            regrowth_probability: Percent chance an Empty cell becomes a Tree
            lightning_probability: Percent chance a Tree with no burning
                neighbours is struck by lightning
            step_interval_ms: Delay between scheduled steps, in milliseconds
            seed: Optional seed for the random number generator
        """
        super().__init__()
        if seed is not None:
            self.reset_randomizer(seed)

        self._grid = ForestGrid(width, height, CellState.Tree)
        self._lock = threading.Lock()
        self._listeners: list[StateListener] = []
        self._regrowth_probability = constants.DEFAULT_PROBABILITY
        self._lightning_probability = constants.DEFAULT_PROBABILITY
        self._step_interval_ms = constants.DEFAULT_STEP_INTERVAL_MS
        self.running = False
        self.generation = 0

        # Invalid constructor values are ignored the same way as later assignments
        self.regrowth_probability = regrowth_probability
        self.lightning_probability = lightning_probability
        self.step_interval_ms = step_interval_ms

        logger.info(f"Created {width}x{height} forest (seed={seed})")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def grid(self) -> ForestGrid:
        """The current grid. Replaced, never edited, by each transition."""
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def cells(self) -> tuple[CellState, ...]:
        return self._grid.cells

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def _in_range(value, lower: int, upper: int) -> bool:
        return (
            isinstance(value, numbers.Integral)
            and not isinstance(value, bool)
            and lower <= value <= upper
        )

    @property
    def regrowth_probability(self) -> int:
        return self._regrowth_probability

    @regrowth_probability.setter
    def regrowth_probability(self, value: int) -> None:
        if not self._in_range(
            value, constants.ZERO_PERCENT_PROBABILITY, constants.ONE_HUNDRED_PERCENT_PROBABILITY
        ):
            logger.debug(f"Ignoring regrowth probability {value!r}")
            return
        self._regrowth_probability = int(value)
        self._notify("regrowth_probability")

    @property
    def lightning_probability(self) -> int:
        return self._lightning_probability

    @lightning_probability.setter
    def lightning_probability(self, value: int) -> None:
        if not self._in_range(
            value, constants.ZERO_PERCENT_PROBABILITY, constants.ONE_HUNDRED_PERCENT_PROBABILITY
        ):
            logger.debug(f"Ignoring lightning probability {value!r}")
            return
        self._lightning_probability = int(value)
        self._notify("lightning_probability")

    @property
    def step_interval_ms(self) -> int:
        return self._step_interval_ms

    @step_interval_ms.setter
    def step_interval_ms(self, value: int) -> None:
        if not self._in_range(
            value, constants.MIN_STEP_INTERVAL_MS, constants.MAX_STEP_INTERVAL_MS
        ):
            logger.debug(f"Ignoring step interval {value!r} ms")
            return
        self._step_interval_ms = int(value)
        self._notify("step_interval_ms")

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def on_state_changed(self, callback: StateListener) -> StateListener:
        """
        Register a callback run after the model changes.

        The callback receives the model and the name of what changed:
        ``"cells"``, ``"running"``, ``"regrowth_probability"``,
        ``"lightning_probability"`` or ``"step_interval_ms"``. Returns the
        callback so this can be used as a decorator.
        """
        if callback not in self._listeners:
            self._listeners.append(callback)
        return callback

    def remove_state_listener(self, callback: StateListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, change: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(self, change)
            except Exception:
                logger.exception(f"State listener {listener!r} failed on '{change}'")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @property
    def can_start(self) -> bool:
        return not self.running

    @property
    def can_stop(self) -> bool:
        return self.running

    @property
    def can_step(self) -> bool:
        return not self.running

    @property
    def can_reset(self) -> bool:
        # Reset stops a running simulation first
        return True

    @property
    def can_ignite(self) -> bool:
        return True

    def start(self) -> None:
        """Mark the simulation as running so the scheduler starts ticking."""
        if self.running:
            return
        self.running = True
        logger.info(f"Simulation started (interval {self._step_interval_ms} ms)")
        self._notify("running")

    def stop(self) -> None:
        """Mark the simulation as stopped. A tick in progress still completes."""
        if not self.running:
            return
        self.running = False
        logger.info(f"Simulation stopped at generation {self.generation}")
        self._notify("running")

    def reset(self) -> None:
        """Stop the simulation if needed and turn every cell into a Tree."""
        self.stop()
        with self._lock:
            self._grid.fill(CellState.Tree)
        logger.info("Forest reset")
        self._notify("cells")

    def step(self) -> None:
        """Advance one generation by hand. Ignored while running."""
        if self.running:
            logger.debug("Ignoring manual step while the simulation is running")
            return
        self._advance()

    def tick(self) -> None:
        """Advance one generation on behalf of the scheduler. Ignored while stopped."""
        if not self.running:
            logger.debug("Ignoring scheduled tick while the simulation is stopped")
            return
        self._advance()

    def ignite(self, index: int) -> bool:
        """
        Set a Tree cell on fire.

        Args:
            index: Row-major index of the cell

        Returns:
            True if a Tree was set on fire, False if nothing changed
        """
        with self._lock:
            grid = self._grid
            if not grid.is_valid_index(index) or grid.get(index) is not CellState.Tree:
                logger.debug(f"Ignoring ignition at index {index}")
                return False
            grid.set(index, CellState.Burning)
        logger.debug(f"Ignited cell {index}")
        self._notify("cells")
        return True

    def ignite_at(
        self, x: float, y: float, rendered_width: float, rendered_height: float
    ) -> bool:
        """Set on fire the Tree under a pointer position on a rendered grid."""
        # Off-grid columns would otherwise wrap into the neighbouring row
        if not (0 <= x < rendered_width and 0 <= y < rendered_height):
            return False
        index = point_to_index(
            x, y, rendered_width, rendered_height, self.width, self.height
        )
        if index is None:
            return False
        return self.ignite(index)

    # ------------------------------------------------------------------
    # Transition
    # ------------------------------------------------------------------

    def _roll(self, probability: int) -> bool:
        """Return True with the given whole-percent probability."""
        if probability == constants.ZERO_PERCENT_PROBABILITY:
            return False
        if probability == constants.ONE_HUNDRED_PERCENT_PROBABILITY:
            return True
        draw = self.random.randint(constants.MINIMUM_RANDOM_DRAW, constants.MAXIMUM_RANDOM_DRAW)
        return draw <= probability

    @staticmethod
    def _has_burning_neighbour(grid: ForestGrid, index: int) -> bool:
        return any(
            grid.get(neighbour) is CellState.Burning
            for neighbour in neighbour_indices(index, grid.width, grid.height)
        )

    def _next_state(
        self, grid: ForestGrid, index: int, regrowth: int, lightning: int
    ) -> CellState:
        state = grid.get(index)
        if state is CellState.Empty:
            return CellState.Tree if self._roll(regrowth) else CellState.Empty
        if state is CellState.Tree:
            if self._has_burning_neighbour(grid, index):
                return CellState.Burning
            return CellState.Burning if self._roll(lightning) else CellState.Tree
        return CellState.Empty

    def _advance(self) -> None:
        """
        Compute the next generation and swap it in.

        Every next state is read from the current grid only. The new grid is
        built on the side and only replaces the current one once every cell
        has been computed, so a failure leaves the current grid untouched.
        """
        with self._lock:
            current = self._grid
            regrowth = self._regrowth_probability
            lightning = self._lightning_probability

            updated = ForestGrid(current.width, current.height, CellState.Empty)
            for index in range(current.size):
                updated.set(index, self._next_state(current, index, regrowth, lightning))

            self._grid = updated
            self.generation += 1
            generation = self.generation

        if logger.isEnabledFor(logging.DEBUG):
            counts = count_states(updated)
            logger.debug(
                f"Generation {generation}: {counts.trees} trees, "
                f"{counts.burning} burning, {counts.empty} empty"
            )
        self._notify("cells")

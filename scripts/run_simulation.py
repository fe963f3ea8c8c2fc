#!/usr/bin/env python3
"""Headless console runner for the forest fire simulation.

Starts a fire in the middle of the forest, lets the StepScheduler drive the
model and prints every generation. Edit CONFIG to tweak the run.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Any, Dict

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_spread import CellState, FireModel, StepScheduler, count_states

logger = logging.getLogger(__name__)


# ---- User-configurable parameters ----
CONFIG: Dict[str, Any] = {
    "width": 20,
    "height": 10,
    "regrowth_probability": 2,
    "lightning_probability": 0,
    "step_interval_ms": 200,
    "seed": 42,
    "max_steps": 50,
}

TILES = {
    CellState.Empty: "⬛",
    CellState.Tree: "🌲",
    CellState.Burning: "🔥",
}


def print_grid(model: FireModel) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        model: The FireModel instance to visualize
    """
    cells = model.cells
    rows = []
    for y in range(model.height):
        row = cells[y * model.width:(y + 1) * model.width]
        rows.append("".join(TILES[state] for state in row))
    print("\n".join(rows))


def main() -> None:
    """Run the forest fire simulation in the console."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    model = FireModel(
        width=CONFIG["width"],
        height=CONFIG["height"],
        regrowth_probability=CONFIG["regrowth_probability"],
        lightning_probability=CONFIG["lightning_probability"],
        step_interval_ms=CONFIG["step_interval_ms"],
        seed=CONFIG["seed"],
    )
    center = model.width // 2 + (model.height // 2) * model.width
    model.ignite(center)

    print("--- INITIAL STATE ---")
    print_grid(model)

    done = threading.Event()

    @model.on_state_changed
    def report(changed: FireModel, change: str) -> None:
        if change != "cells":
            return
        print(f"\n--- GENERATION {changed.generation} ---")
        print_grid(changed)
        if changed.generation >= CONFIG["max_steps"] or not count_states(changed.grid).is_burning:
            changed.stop()
            done.set()

    with StepScheduler(model):
        model.start()
        done.wait()

    print("\nFire has been extinguished." if not count_states(model.grid).is_burning
          else "\nStep limit reached.")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Pygame window for the forest fire simulation.

The window loop doubles as the step scheduler: while the model is running
it calls ``model.tick()`` each time the model's step interval has elapsed.

Controls:
    SPACE       start / stop
    S           single step (only while stopped)
    R           reset (stops first)
    UP / DOWN   regrowth probability +/- 1
    RIGHT/LEFT  lightning probability +/- 1
    Left click  ignite the tree under the cursor
    ESC         quit

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from fire_spread import FireModel, constants

from visualization import (
    GridRenderer,
    InfoPanel,
    IntervalSlider,
    BLACK,
    DEFAULT_CELL_SIZE,
    PANEL_HEIGHT,
    FRAME_RATE,
)

logger = logging.getLogger(__name__)


# ---- User-configurable parameters ----
CONFIG: Dict[str, Any] = {
    "width": constants.FOREST_WIDTH,
    "height": constants.FOREST_HEIGHT,
    "cell_size": DEFAULT_CELL_SIZE,
    "regrowth_probability": 5,
    "lightning_probability": 0,
    "step_interval_ms": 200,
    "seed": None,
}


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Handles the window loop, event processing and stepping the model at
    its configured interval.

    Attributes:
        model: The forest fire model.
        screen: Pygame display surface.
        clock: Pygame clock for frame rate control.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying simulation info.
        slider: Step interval slider.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        self.model = FireModel(
            width=config["width"],
            height=config["height"],
            regrowth_probability=config["regrowth_probability"],
            lightning_probability=config["lightning_probability"],
            step_interval_ms=config["step_interval_ms"],
            seed=config["seed"],
        )
        cell_size = config["cell_size"]
        self.grid_pixel_height = self.model.height * cell_size
        window_width = max(self.model.width * cell_size, 640)
        window_height = self.grid_pixel_height + PANEL_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption("Forest Fire Simulator")
        self.clock = pygame.time.Clock()

        self.renderer = GridRenderer(cell_size)
        self.info_panel = InfoPanel()
        self.panel_rect = pygame.Rect(0, self.grid_pixel_height, window_width, PANEL_HEIGHT)
        self.slider = IntervalSlider(
            x=window_width - 260,
            y=self.grid_pixel_height + 100,
            width=240,
            height=14,
            min_val=constants.MIN_STEP_INTERVAL_MS,
            max_val=constants.MAX_STEP_INTERVAL_MS,
        )
        self.dragging_slider = False
        self.elapsed_ms = 0

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Returns:
            False if the window should close, True otherwise.
        """
        model = self.model
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_SPACE:
            if model.running:
                model.stop()
            else:
                self.elapsed_ms = 0
                model.start()
        elif event.key == pygame.K_s:
            model.step()
        elif event.key == pygame.K_r:
            model.reset()
        elif event.key == pygame.K_UP:
            model.regrowth_probability += 1
        elif event.key == pygame.K_DOWN:
            model.regrowth_probability -= 1
        elif event.key == pygame.K_RIGHT:
            model.lightning_probability += 1
        elif event.key == pygame.K_LEFT:
            model.lightning_probability -= 1
        return True

    def _handle_mouse_events(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            new_interval = self.slider.handle_click(*event.pos)
            if new_interval is not None:
                self.dragging_slider = True
                self.model.step_interval_ms = new_interval
                return
            index = self.renderer.pixel_to_index(self.model, event.pos)
            if index is not None:
                self.model.ignite(index)

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging_slider = False

        elif event.type == pygame.MOUSEMOTION and self.dragging_slider:
            new_interval = self.slider.handle_click(*event.pos)
            if new_interval is not None:
                self.model.step_interval_ms = new_interval

    def _update_simulation(self, frame_ms: int) -> None:
        """Tick the model once its step interval has elapsed."""
        if not self.model.running:
            self.elapsed_ms = 0
            return
        self.elapsed_ms += frame_ms
        if self.elapsed_ms >= self.model.step_interval_ms:
            self.elapsed_ms = 0
            self.model.tick()

    def _render(self) -> None:
        self.screen.fill(BLACK)
        self.renderer.draw(self.screen, self.model)
        self.info_panel.draw(self.screen, self.model, self.panel_rect)
        self.slider.draw(self.screen, self.model.step_interval_ms)
        pygame.display.flip()

    def run(self) -> None:
        running = True
        while running:
            self._render()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False
                else:
                    self._handle_mouse_events(event)

            frame_ms = self.clock.tick(FRAME_RATE)
            self._update_simulation(frame_ms)

        self.model.stop()
        pygame.quit()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    SimulationRunner(CONFIG).run()


if __name__ == "__main__":
    main()

"""Grid rendering functionality for the forest fire simulation.

This module provides the GridRenderer class which handles drawing the
cellular automaton grid with one colored tile per cell.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from fire_spread.cell import CellState
from fire_spread.coordinates_transform import point_to_index
from .colors import BURNING_COLOR, EMPTY_COLOR, TREE_COLOR, Color

if TYPE_CHECKING:
    from fire_spread.model import FireModel


class GridRenderer:
    """Renders the forest grid onto a Pygame surface.

    Cells are drawn row by row from the top-left corner, matching the
    model's row-major indexing.

    Attributes:
        cell_size: Size of each cell in pixels.
    """

    STATE_COLORS = {
        CellState.Empty: EMPTY_COLOR,
        CellState.Tree: TREE_COLOR,
        CellState.Burning: BURNING_COLOR,
    }

    def __init__(self, cell_size: int) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels.
        """
        self.cell_size = cell_size

    def get_cell_color(self, state: CellState) -> Color:
        """Get the RGB color for a cell state."""
        return self.STATE_COLORS.get(state, EMPTY_COLOR)

    def grid_rect(self, model: "FireModel", offset_x: int = 0, offset_y: int = 0) -> pygame.Rect:
        """Screen rectangle covered by the rendered grid."""
        return pygame.Rect(
            offset_x,
            offset_y,
            model.width * self.cell_size,
            model.height * self.cell_size,
        )

    def draw(
        self,
        screen: pygame.Surface,
        model: "FireModel",
        offset_x: int = 0,
        offset_y: int = 0,
    ) -> None:
        """Draw every cell of the model's current grid."""
        # Take one snapshot so a concurrent step cannot mix two generations
        cells = model.grid.as_array()
        for y, row in enumerate(cells):
            for x, value in enumerate(row):
                pygame.draw.rect(
                    screen,
                    self.get_cell_color(CellState(int(value))),
                    (
                        offset_x + x * self.cell_size,
                        offset_y + y * self.cell_size,
                        self.cell_size,
                        self.cell_size,
                    ),
                )

    def pixel_to_index(
        self,
        model: "FireModel",
        pos: tuple[int, int],
        offset_x: int = 0,
        offset_y: int = 0,
    ) -> Optional[int]:
        """Convert a mouse position into a cell index, or None outside the grid."""
        rect = self.grid_rect(model, offset_x, offset_y)
        if not rect.collidepoint(pos):
            return None
        return point_to_index(
            pos[0] - offset_x,
            pos[1] - offset_y,
            rect.width,
            rect.height,
            model.width,
            model.height,
        )

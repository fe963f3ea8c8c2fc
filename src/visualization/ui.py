"""UI components for the forest fire visualization.

This module contains interactive UI elements like the info panel
showing simulation status and the step interval slider.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from fire_spread.metrics import count_states
from .colors import WHITE, DISABLED_COLOR, PANEL_COLOR

if TYPE_CHECKING:
    from fire_spread.model import FireModel


class InfoPanel:
    """Displays simulation information below the grid.

    Shows the generation, run status, cell counts, probabilities, the step
    interval and the keyboard commands. Commands the model currently
    refuses are drawn greyed out.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for secondary information.
    """

    PADDING = 12

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 22)

    def _commands(self, model: "FireModel") -> list[tuple[str, bool]]:
        return [
            ("SPACE = Start", model.can_start),
            ("SPACE = Stop", model.can_stop),
            ("S = Step", model.can_step),
            ("R = Reset", model.can_reset),
            ("Click = Ignite", model.can_ignite),
        ]

    def draw(
        self,
        screen: pygame.Surface,
        model: "FireModel",
        panel_rect: pygame.Rect,
    ) -> None:
        """Draw the panel inside the given rectangle."""
        panel_surface = pygame.Surface(panel_rect.size, pygame.SRCALPHA)
        panel_surface.fill((*PANEL_COLOR, 200))
        screen.blit(panel_surface, panel_rect.topleft)

        x = panel_rect.x + self.PADDING
        y = panel_rect.y + self.PADDING
        counts = count_states(model.grid)

        status = "RUNNING" if model.running else "STOPPED"
        header = self.font.render(f"Generation: {model.generation}   {status}", True, WHITE)
        screen.blit(header, (x, y))

        lines = [
            f"Trees: {counts.trees}   Burning: {counts.burning}   Empty: {counts.empty}",
            f"Regrowth: {model.regrowth_probability}% (Up/Down)   "
            f"Lightning: {model.lightning_probability}% (Right/Left)",
            f"Step interval: {model.step_interval_ms} ms",
        ]
        for i, line in enumerate(lines):
            text = self.small_font.render(line, True, WHITE)
            screen.blit(text, (x, y + 32 + i * 22))

        cmd_x = x
        cmd_y = panel_rect.bottom - self.PADDING - 20
        for label, enabled in self._commands(model):
            text = self.small_font.render(label, True, WHITE if enabled else DISABLED_COLOR)
            screen.blit(text, (cmd_x, cmd_y))
            cmd_x += text.get_width() + 24


class IntervalSlider:
    """Interactive slider for the step interval in milliseconds.

    Allows the user to adjust the interval by clicking and dragging a
    circular handle along a horizontal bar.

    Attributes:
        x: X coordinate of the slider's left edge.
        y: Y coordinate of the slider's top edge.
        width: Width of the slider bar in pixels.
        height: Height of the slider bar in pixels.
        min_val: Minimum value (ms).
        max_val: Maximum value (ms).
    """

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        min_val: int,
        max_val: int
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val

    def draw(self, screen: pygame.Surface, current_val: int) -> None:
        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, (20, 20, 20), bar_rect, border_radius=6)
        pygame.draw.rect(screen, (70, 70, 70), bar_rect, 2, border_radius=6)

        ratio = (current_val - self.min_val) / (self.max_val - self.min_val)
        handle_x = self.x + int(ratio * self.width)
        handle_y = self.y + self.height // 2
        pygame.draw.circle(screen, (255, 80, 0), (handle_x, handle_y), self.height // 2 + 4)

    def handle_click(self, mouse_x: int, mouse_y: int) -> Optional[int]:
        """Interval under the mouse, or None if the click missed the slider."""

        # easier grab area (more forgiving)
        grab_margin = 10
        if not (self.x - grab_margin <= mouse_x <= self.x + self.width + grab_margin):
            return None
        if not (self.y - grab_margin <= mouse_y <= self.y + self.height + grab_margin):
            return None

        ratio = (mouse_x - self.x) / self.width
        new_val = self.min_val + ratio * (self.max_val - self.min_val)

        return max(self.min_val, min(self.max_val, int(new_val)))

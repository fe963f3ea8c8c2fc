"""Visualization package for the forest fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import InfoPanel, IntervalSlider

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',
    'IntervalSlider',

    # Cell state colors
    'EMPTY_COLOR',
    'TREE_COLOR',
    'BURNING_COLOR',

    # UI colors
    'BLACK',
    'WHITE',
    'DISABLED_COLOR',
    'PANEL_COLOR',

    # Default parameters
    'DEFAULT_CELL_SIZE',
    'PANEL_HEIGHT',
    'FRAME_RATE',
]

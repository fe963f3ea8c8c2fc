"""Color definitions and constants for the forest fire visualization.

This module contains all RGB color tuples and default configuration values
used throughout the Pygame visualization.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

EMPTY_COLOR: Color = (40, 30, 20)                   # bare ground (background)
TREE_COLOR: Color = (2, 168, 2)                     # green
BURNING_COLOR: Color = (255, 0, 0)                  # red (on fire)

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Grid lines, text
WHITE: Color = (255, 255, 255)                      # Background
DISABLED_COLOR: Color = (120, 120, 120)             # Unavailable commands
PANEL_COLOR: Color = (80, 0, 0)                     # Info panel background

# ============================================================================
# DEFAULT WINDOW PARAMETERS
# ============================================================================

DEFAULT_CELL_SIZE: int = 8                          # Cell size in pixels
PANEL_HEIGHT: int = 170                             # Space below the grid for UI
FRAME_RATE: int = 60                                # Window redraw rate

"""Default configuration values and bounds for the simulation.

Probabilities are whole percentages. Values outside the bounds below are
ignored by the model setters rather than clamped.
"""

# ============================================================================
# GRID SIZE
# ============================================================================

FOREST_WIDTH: int = 75                              # Grid width in cells
FOREST_HEIGHT: int = 75                             # Grid height in cells

# ============================================================================
# PROBABILITIES (percent)
# ============================================================================

DEFAULT_PROBABILITY: int = 0
ZERO_PERCENT_PROBABILITY: int = 0                   # Never fires
ONE_HUNDRED_PERCENT_PROBABILITY: int = 100          # Always fires

# Range of the uniform draw used for thresholds between 1 and 99
MINIMUM_RANDOM_DRAW: int = 1
MAXIMUM_RANDOM_DRAW: int = 99

# ============================================================================
# STEP INTERVAL (milliseconds)
# ============================================================================

MIN_STEP_INTERVAL_MS: int = 100
DEFAULT_STEP_INTERVAL_MS: int = 1000
MAX_STEP_INTERVAL_MS: int = 5000

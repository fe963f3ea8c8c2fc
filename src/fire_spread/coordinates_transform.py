"""Mapping from rendered pointer positions to grid cell indices."""

import math
from typing import Optional


def point_to_index(
    x: float,
    y: float,
    rendered_width: float,
    rendered_height: float,
    grid_width: int,
    grid_height: int,
) -> Optional[int]:
    """
    Convert a position on a rendered grid into a row-major cell index.

    The position and rendered size must use the same units (pixels, points,
    ...). Positions outside the rendered area produce indices outside the
    grid; the model ignores those.

    Args:
        x: Horizontal position measured from the left edge
        y: Vertical position measured from the top edge
        rendered_width: Width of the rendered grid
        rendered_height: Height of the rendered grid
        grid_width: Grid width in cells
        grid_height: Grid height in cells

    Returns:
        The cell index, or None if the rendered size is not positive
    """
    if rendered_width <= 0 or rendered_height <= 0:
        return None
    col = math.floor(x / rendered_width * grid_width)
    row = math.floor(y / rendered_height * grid_height)
    return col + row * grid_width

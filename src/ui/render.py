"""Drawing helpers for the active buffer.

Produces colours and pixel rectangles for any 2D backend, plus a
terminal-friendly text frame.
"""

import numpy as np
from typing import List, Optional, Tuple

from ..core.cell import CellState
from ..core.settings import LifeSettings
from ..core.world import Region, World

RGBA = Tuple[float, float, float, float]

BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)
WHITE: RGBA = (1.0, 1.0, 1.0, 1.0)
RED: RGBA = (1.0, 0.0, 0.0, 1.0)
BLUE: RGBA = (0.0, 0.0, 1.0, 1.0)

BACKGROUND = BLACK

CELL_COLORS = {
    CellState.DEAD: WHITE,
    CellState.COLOR_A: RED,
    CellState.COLOR_B: BLUE,
}


def cell_color(state: CellState) -> RGBA:
    """Get the draw colour for a cell state."""
    return CELL_COLORS[state]


def cell_rectangles(world: World, settings: Optional[LifeSettings] = None) -> Tuple[np.ndarray, List[RGBA]]:
    """Collect drawable rectangles for every live cell.

    Rectangles are relative to the origin cell; callers translate by
    settings.origin_offset to centre (0, 0) in the window.

    Args:
        world: World to draw
        settings: Square size source (defaults used when omitted)

    Returns:
        (rects, colors) - float array of shape (n, 4) holding [x, y, w, h],
        and the matching RGBA colour per rectangle
    """
    settings = settings or LifeSettings()
    size = settings.square_size

    live = list(world.live_cells())
    rects = np.zeros((len(live), 4), dtype=np.float64)
    colors = []

    for i, (loc, state) in enumerate(live):
        rects[i] = (loc.col * size, loc.row * size, size, size)
        colors.append(cell_color(state))

    return rects, colors


def render_ascii(world: World, region: Optional[Region] = None,
                 alive_a: str = '█', alive_b: str = '▓', dead: str = '░') -> str:
    """Render the active buffer as text.

    Args:
        world: World to render
        region: Inclusive (min_row, min_col, max_row, max_col); live bounds by default
        alive_a: Symbol for COLOR_A cells
        alive_b: Symbol for COLOR_B cells
        dead: Symbol for dead cells

    Returns:
        Rows joined with newlines (empty string for an empty world)
    """
    array = world.to_array(region)
    symbols = {
        CellState.DEAD.value: dead,
        CellState.COLOR_A.value: alive_a,
        CellState.COLOR_B.value: alive_b,
    }
    return '\n'.join(''.join(symbols[int(value)] for value in line) for line in array)

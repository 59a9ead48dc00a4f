"""Pointer painting helpers.

Translates window pointer positions into world cells and applies paint
strokes as immediate edits. Window and event handling stay with the caller.
"""

import logging
import math
from typing import Optional, Tuple

from ..core.cell import CellState, Coordinate
from ..core.settings import LifeSettings
from ..core.world import World

logger = logging.getLogger(__name__)

# Cells covered by one stroke, relative to the pointer cell
STROKE_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0), (1, 0), (0, 1), (1, 1))


def pointer_to_loc(x: float, y: float, settings: Optional[LifeSettings] = None) -> Coordinate:
    """Convert window pixel coordinates to the world cell under the pointer.

    Cell (0, 0) sits at the window centre; x selects the column, y the row.
    """
    settings = settings or LifeSettings()
    offset = settings.origin_offset

    col = math.floor((x - offset) / settings.square_size)
    row = math.floor((y - offset) / settings.square_size)
    return Coordinate(row, col)


def brush_state(left_down: bool, right_down: bool) -> Optional[CellState]:
    """Pick the paint colour from mouse button state.

    Left paints COLOR_A, right paints COLOR_B; with both held the colours
    are combined. Returns None when no button is held.
    """
    left = CellState.COLOR_A if left_down else CellState.DEAD
    right = CellState.COLOR_B if right_down else CellState.DEAD

    state = CellState.combine(left, right)
    return state if state.is_alive() else None


def paint_stroke(world: World, loc: Tuple[int, int], state: CellState) -> None:
    """Paint a 2x2 block with its top-left corner at loc, visible immediately."""
    row, col = loc
    logger.debug(f"Painting ({row}, {col}) with {state.name}")

    for d_row, d_col in STROKE_OFFSETS:
        world.set_now(Coordinate(row + d_row, col + d_col), state)


def paint_at_pointer(world: World, x: float, y: float,
                     left_down: bool, right_down: bool,
                     settings: Optional[LifeSettings] = None) -> Optional[Coordinate]:
    """Apply one pointer event: paint under the pointer if a button is held.

    Returns:
        The painted cell, or None when nothing was painted
    """
    state = brush_state(left_down, right_down)
    if state is None:
        return None

    loc = pointer_to_loc(x, y, settings)
    paint_stroke(world, loc, state)
    return loc

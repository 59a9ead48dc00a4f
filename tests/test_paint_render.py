"""Tests for pointer painting and drawing helpers."""

import numpy as np
import pytest
from src.core.cell import CellState, Coordinate
from src.core.settings import LifeSettings
from src.core.world import World
from src.ui.paint import brush_state, paint_at_pointer, paint_stroke, pointer_to_loc
from src.ui.render import BLUE, RED, WHITE, cell_color, cell_rectangles, render_ascii


class TestPointerToLoc:
    """Window pixels to world cells."""

    def test_window_centre_is_origin(self):
        """The window centre maps to cell (0, 0)."""
        assert pointer_to_loc(512.0, 512.0) == Coordinate(0, 0)

    def test_floor_division(self):
        """Positions left of or above the centre floor to negative cells."""
        assert pointer_to_loc(511.9, 512.0) == Coordinate(0, -1)
        assert pointer_to_loc(517.0, 507.0) == Coordinate(-1, 1)

    def test_custom_settings(self):
        """Square and window size come from settings."""
        settings = LifeSettings(square_size=10.0, window_size=200)
        assert pointer_to_loc(135.0, 79.0, settings) == Coordinate(-3, 3)


class TestBrush:
    """Mouse buttons to paint colour."""

    @pytest.mark.parametrize("left,right,expected", [
        (True, False, CellState.COLOR_A),
        (False, True, CellState.COLOR_B),
        (True, True, CellState.COLOR_A),
        (False, False, None),
    ])
    def test_brush_state(self, left, right, expected):
        """Left paints A, right paints B, both resolve to A."""
        assert brush_state(left, right) is expected

    def test_paint_stroke(self):
        """A stroke paints a 2x2 block visible immediately."""
        world = World()
        paint_stroke(world, (3, -2), CellState.COLOR_B)
        assert world.bounds() == (3, -2, 4, -1)
        assert world.count_by_state()[CellState.COLOR_B] == 4

    def test_paint_at_pointer(self):
        """Pointer events paint under the cursor when a button is held."""
        world = World()
        assert paint_at_pointer(world, 512.0, 512.0, False, False) is None
        assert world.live_count() == 0

        loc = paint_at_pointer(world, 512.0, 512.0, True, False)
        assert loc == Coordinate(0, 0)
        assert world.get((1, 1)) is CellState.COLOR_A

    def test_painted_block_survives_step(self):
        """A painted stroke is a block, so it is a still life."""
        world = World()
        paint_stroke(world, (0, 0), CellState.COLOR_A)
        world.step()
        assert world.live_count() == 4


class TestRender:
    """Colours, rectangles and text frames."""

    def test_cell_color(self):
        """Each state has a draw colour."""
        assert cell_color(CellState.COLOR_A) == RED
        assert cell_color(CellState.COLOR_B) == BLUE
        assert cell_color(CellState.DEAD) == WHITE

    def test_rectangles(self):
        """Live cells become squares at col/row times square size."""
        world = World()
        world.set_now((2, 3), CellState.COLOR_A)

        rects, colors = cell_rectangles(world)
        np.testing.assert_array_equal(rects, np.array([[15.0, 10.0, 5.0, 5.0]]))
        assert colors == [RED]

    def test_rectangles_empty(self):
        """Empty worlds give no rectangles."""
        rects, colors = cell_rectangles(World())
        assert rects.shape == (0, 4)
        assert colors == []

    def test_render_ascii(self):
        """Text frames use per-colour symbols."""
        world = World()
        world.set_now((0, 0), CellState.COLOR_A)
        world.set_now((1, 1), CellState.COLOR_B)
        assert render_ascii(world, alive_a='A', alive_b='B', dead='.') == "A.\n.B"

    def test_render_ascii_empty(self):
        """An empty world renders as an empty string."""
        assert render_ascii(World()) == ""

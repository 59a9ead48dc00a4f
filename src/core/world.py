"""Sparse double-buffered world for the two-colour Game of Life.

The plane is unbounded: each buffer is a dict keyed by Coordinate, and a
coordinate missing from a buffer is DEAD. Only cells that were written,
or that neighbour a written live cell, are materialized, so memory follows
activity rather than grid extent.

Two buffers are kept. The active buffer is what get/current read and what
set_now edits. The next buffer is where set stages the generation being
computed; swap_and_clear promotes it.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from .cell import CellState, Coordinate
from .errors import ConfigurationParseError
from .rules import RuleParams, next_state

logger = logging.getLogger(__name__)

Buffer = Dict[Coordinate, CellState]
Region = Tuple[int, int, int, int]

# Text rendering symbols for __str__
_STATE_SYMBOLS = {
    CellState.DEAD: '.',
    CellState.COLOR_A: 'A',
    CellState.COLOR_B: 'B',
}


class World:
    """Double-buffered sparse grid of cell states.

    Attributes:
        rule_params: Survival/birth counts applied by step()
        generation: Number of completed step() calls
    """

    def __init__(self, rule_params: Optional[RuleParams] = None):
        """Create an empty world.

        Args:
            rule_params: Rule parameters (standard Conway when omitted)
        """
        self._buffer_a: Buffer = {}
        self._buffer_b: Buffer = {}
        self._using_buffer_a = True
        self.rule_params = rule_params or RuleParams.standard()
        self.generation = 0

        logger.debug(f"Created sparse world with {self.rule_params}")

    @classmethod
    def load_from_configuration(cls, data: str, dead_char: str = '.', alive_char: str = '*',
                                rule_params: Optional[RuleParams] = None) -> 'World':
        """Build a world from configuration text.

        Each dead marker writes DEAD and each alive marker writes COLOR_A at
        the current (row, col), then advances the column. A newline advances
        the row and resets the column; carriage returns are skipped.

        All writes go through set(), so they land in the next buffer. Call
        swap_and_clear() on the result to make the pattern active.

        Args:
            data: Configuration text
            dead_char: Character marking a dead cell
            alive_char: Character marking a live cell
            rule_params: Rule parameters for the new world

        Returns:
            World with the pattern staged in its next buffer

        Raises:
            ValueError: If the markers are unusable
            ConfigurationParseError: On the first unrecognised character
        """
        _check_markers(dead_char, alive_char)

        world = cls(rule_params)
        row, col = 0, 0

        for char in data:
            if char == dead_char:
                world.set(Coordinate(row, col), CellState.DEAD)
                col += 1
            elif char == alive_char:
                world.set(Coordinate(row, col), CellState.COLOR_A)
                col += 1
            elif char == '\n':
                row += 1
                col = 0
            elif char == '\r':
                continue
            else:
                raise ConfigurationParseError(char, row, col)

        logger.debug(f"Loaded configuration: {row + 1 if col else row} rows, "
                     f"{len(world._next_buffer())} staged entries")
        return world

    # Buffer selection

    def _current_buffer(self) -> Buffer:
        return self._buffer_a if self._using_buffer_a else self._buffer_b

    def _next_buffer(self) -> Buffer:
        return self._buffer_b if self._using_buffer_a else self._buffer_a

    def current(self) -> Mapping[Coordinate, CellState]:
        """Read-only view of the active buffer."""
        return MappingProxyType(self._current_buffer())

    def get(self, loc: Tuple[int, int]) -> CellState:
        """Get the state at a location in the active buffer (DEAD if absent)."""
        return self._current_buffer().get(Coordinate(*loc), CellState.DEAD)

    def set(self, loc: Tuple[int, int], state: CellState) -> None:
        """Write a state into the next buffer.

        Live states also materialize any missing neighbours as DEAD, so
        the following generation's candidate search can find them.

        Args:
            loc: Location to write
            state: New state
        """
        _write(self._next_buffer(), Coordinate(*loc), state)

    def set_now(self, loc: Tuple[int, int], state: CellState) -> None:
        """Write a state into the active buffer, visible immediately.

        Used for interactive edits. Same neighbour materialization as set().

        Args:
            loc: Location to write
            state: New state
        """
        _write(self._current_buffer(), Coordinate(*loc), state)

    def set_alive_now(self, loc: Tuple[int, int]) -> None:
        """Make a location COLOR_A in the active buffer."""
        self.set_now(loc, CellState.COLOR_A)

    def swap_and_clear(self) -> None:
        """Promote the next buffer to active and empty the new next buffer."""
        self._using_buffer_a = not self._using_buffer_a
        self._next_buffer().clear()

    def step(self) -> int:
        """Advance the world one generation.

        Only live cells and their neighbours are evaluated. Every read is
        made against the active buffer and every write goes to the next
        buffer, so the order in which candidates are visited is irrelevant.

        Returns:
            Number of live cells after the step
        """
        current = self._current_buffer()

        candidates = set()
        for loc, state in current.items():
            if state.is_alive():
                candidates.add(loc)
                candidates.update(loc.neighbors())

        updates: List[Tuple[Coordinate, CellState]] = []
        for loc in candidates:
            state = current.get(loc, CellState.DEAD)
            color_a, color_b = _count_neighbors(current, loc)
            new_state = next_state(state, color_a, color_b, self.rule_params)

            # Dead-to-dead candidates stay implicit
            if new_state.is_alive() or state.is_alive():
                updates.append((loc, new_state))

        for loc, new_state in updates:
            self.set(loc, new_state)

        self.swap_and_clear()
        self.generation += 1

        live_count = self.live_count()
        logger.debug(f"Generation {self.generation}: {len(candidates)} candidates, "
                     f"{len(updates)} writes, {live_count} alive")
        return live_count

    def step_multiple(self, steps: int) -> List[int]:
        """Advance several generations.

        Args:
            steps: Number of generations (0 or more)

        Returns:
            Live cell count after each step

        Raises:
            ValueError: If steps is negative
        """
        if steps < 0:
            raise ValueError("Step count must be non-negative")
        return [self.step() for _ in range(steps)]

    # Queries

    def live_cells(self) -> Iterator[Tuple[Coordinate, CellState]]:
        """Iterate over live (location, state) pairs of the active buffer."""
        for loc, state in self._current_buffer().items():
            if state.is_alive():
                yield loc, state

    def live_count(self) -> int:
        """Get total number of live cells."""
        return sum(1 for _ in self.live_cells())

    def count_by_state(self) -> Dict[CellState, int]:
        """Count live cells per colour."""
        counts = {CellState.COLOR_A: 0, CellState.COLOR_B: 0}
        for _, state in self.live_cells():
            counts[state] += 1
        return counts

    def bounds(self) -> Optional[Region]:
        """Get bounding box of live cells (min_row, min_col, max_row, max_col), or None if empty."""
        locs = [loc for loc, _ in self.live_cells()]
        if not locs:
            return None

        rows = [loc.row for loc in locs]
        cols = [loc.col for loc in locs]
        return (min(rows), min(cols), max(rows), max(cols))

    def get_center_of_mass(self) -> Tuple[float, float]:
        """Calculate center of mass of live cells.

        Returns:
            (row, col) of the live cell centroid, (0.0, 0.0) when empty
        """
        locs = np.array([loc for loc, _ in self.live_cells()], dtype=np.float64)
        if len(locs) == 0:
            return (0.0, 0.0)

        center = locs.mean(axis=0)
        return (float(center[0]), float(center[1]))

    def to_array(self, region: Optional[Region] = None) -> np.ndarray:
        """Get a dense snapshot of the active buffer.

        Args:
            region: Inclusive (min_row, min_col, max_row, max_col); defaults to bounds()

        Returns:
            2D uint8 array of CellState values (0 dead, 1 COLOR_A, 2 COLOR_B)
        """
        if region is None:
            region = self.bounds()
            if region is None:
                return np.zeros((0, 0), dtype=np.uint8)

        min_row, min_col, max_row, max_col = region
        if max_row < min_row or max_col < min_col:
            raise ValueError(f"Invalid region {region}")

        array = np.zeros((max_row - min_row + 1, max_col - min_col + 1), dtype=np.uint8)
        for loc, state in self.live_cells():
            if min_row <= loc.row <= max_row and min_col <= loc.col <= max_col:
                array[loc.row - min_row, loc.col - min_col] = state.value
        return array

    def load_pattern(self, pattern: np.ndarray, row: int, col: int,
                     state: CellState = CellState.COLOR_A) -> None:
        """Paint a pattern into the active buffer.

        Args:
            pattern: 2D array; truthy entries become live cells
            row: Top row for placement
            col: Left column for placement
            state: Live state to paint with

        Raises:
            ValueError: If pattern is not 2D or state is DEAD
        """
        pattern = np.asarray(pattern)
        if pattern.ndim != 2:
            raise ValueError(f"Pattern must be 2D, got shape {pattern.shape}")
        if not state.is_alive():
            raise ValueError("Pattern state must be a live colour")

        for py, px in zip(*np.nonzero(pattern)):
            self.set_now(Coordinate(row + int(py), col + int(px)), state)

    def __len__(self) -> int:
        """Number of materialized entries in the active buffer."""
        return len(self._current_buffer())

    def __str__(self) -> str:
        """Text rendering of the live region ('.' dead, 'A'/'B' colours)."""
        array = self.to_array()
        symbols = [_STATE_SYMBOLS[state] for state in CellState]
        return '\n'.join(''.join(symbols[value] for value in line) for line in array)

    def __repr__(self) -> str:
        counts = self.count_by_state()
        return (f"World(generation={self.generation}, "
                f"alive_a={counts[CellState.COLOR_A]}, alive_b={counts[CellState.COLOR_B]}, "
                f"entries={len(self)})")


def _write(buffer: Buffer, loc: Coordinate, state: CellState) -> None:
    """Store a state, materializing missing neighbours of live cells as DEAD."""
    buffer[loc] = state

    if state.is_alive():
        for neighbor in loc.neighbors():
            buffer.setdefault(neighbor, CellState.DEAD)


def _count_neighbors(buffer: Buffer, loc: Coordinate) -> Tuple[int, int]:
    """Tally live COLOR_A and COLOR_B neighbours of loc in buffer."""
    color_a = 0
    color_b = 0

    for neighbor in loc.neighbors():
        state = buffer.get(neighbor, CellState.DEAD)
        if state is CellState.COLOR_A:
            color_a += 1
        elif state is CellState.COLOR_B:
            color_b += 1

    return color_a, color_b


def _check_markers(dead_char: str, alive_char: str) -> None:
    """Validate configuration markers."""
    for marker in (dead_char, alive_char):
        if len(marker) != 1:
            raise ValueError(f"Marker must be a single character, got {marker!r}")
        if marker in '\r\n':
            raise ValueError("Line terminators cannot be used as markers")
    if dead_char == alive_char:
        raise ValueError("Dead and alive markers must differ")

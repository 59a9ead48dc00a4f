"""Cell primitives for the two-colour Game of Life.

Defines the coordinate type used as the sparse grid key and the cell
state enumeration shared by the engine, the loaders and the UI helpers.
"""

from enum import Enum
from typing import NamedTuple, Tuple


# Moore neighbourhood offsets as (d_row, d_col): diagonals first, then orthogonals
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 1), (1, -1), (-1, 1), (-1, -1),
    (1, 0), (0, 1), (-1, 0), (0, -1),
)


class Coordinate(NamedTuple):
    """Signed (row, col) position on the unbounded plane."""
    row: int
    col: int

    def neighbors(self) -> Tuple['Coordinate', ...]:
        """Get the 8 Moore-neighbourhood coordinates around this cell.

        Returns:
            Tuple of 8 distinct coordinates (the cell itself is excluded)
        """
        row, col = self.row, self.col
        return tuple(Coordinate(row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS)


class CellState(Enum):
    """State of a single cell: dead or alive in one of two colours."""
    DEAD = 0
    COLOR_A = 1
    COLOR_B = 2

    def is_alive(self) -> bool:
        """True for either colour, False for DEAD."""
        return self is not CellState.DEAD

    @staticmethod
    def combine(a: 'CellState', b: 'CellState') -> 'CellState':
        """Resolve what two merged cell states become.

        DEAD is the identity element, COLOR_A dominates COLOR_B.

        Args:
            a: First state
            b: Second state

        Returns:
            Combined state
        """
        if a is CellState.DEAD:
            return b
        if b is CellState.DEAD:
            return a
        if a is CellState.COLOR_A or b is CellState.COLOR_A:
            return CellState.COLOR_A
        return CellState.COLOR_B

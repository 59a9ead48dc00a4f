"""
Two-Colour Conway Rules

Survival and birth rules for the two-colour Game of Life, plus the
colour resolution applied to newly born cells. Pure functions only -
buffer management lives in world.py.
"""

from typing import Set, Optional

from .cell import CellState


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine whether a cell is alive next generation.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors of either colour (0-8)

    Returns:
        Next aliveness (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


def resolve_birth_state(color_a_neighbors: int, color_b_neighbors: int) -> CellState:
    """Pick the colour of a newborn cell from its parents.

    The majority colour wins. Ties go to COLOR_A when at least one COLOR_A
    parent exists; COLOR_B otherwise. With the standard birth count of 3
    a strict majority always exists.

    Args:
        color_a_neighbors: Live COLOR_A neighbors
        color_b_neighbors: Live COLOR_B neighbors

    Returns:
        COLOR_A or COLOR_B
    """
    if color_a_neighbors > color_b_neighbors:
        return CellState.COLOR_A
    if color_b_neighbors > color_a_neighbors:
        return CellState.COLOR_B
    if color_a_neighbors > 0:
        return CellState.COLOR_A
    return CellState.COLOR_B


class RuleParams:
    """Survival/birth neighbour counts used by a World.

    Defaults to standard Conway (B3/S23).
    """

    def __init__(self,
                 survival_set: Optional[Set[int]] = None,
                 birth_set: Optional[Set[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})

        Raises:
            ValueError: If a count is outside 0-8, or birth on 0 neighbors is requested
        """
        survival = set(survival_set) if survival_set is not None else SURVIVAL_SET.copy()
        birth = set(birth_set) if birth_set is not None else BIRTH_SET.copy()

        for count in survival | birth:
            if not 0 <= count <= 8:
                raise ValueError(f"Neighbor count {count} outside 0-8")
        # Only cells next to live activity are evaluated, so empty space can never be born
        if 0 in birth:
            raise ValueError("Birth with 0 neighbors is not supported on a sparse grid")

        self.survival_set: Set[int] = survival
        self.birth_set: Set[int] = birth

    @classmethod
    def standard(cls) -> 'RuleParams':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET.copy(), BIRTH_SET.copy())

    def update_cell(self, alive: bool, live_neighbors: int) -> bool:
        """Apply these rule parameters to a cell's aliveness."""
        if alive:
            return live_neighbors in self.survival_set
        return live_neighbors in self.birth_set

    def __repr__(self) -> str:
        return f"RuleParams(survival={sorted(self.survival_set)}, birth={sorted(self.birth_set)})"


def next_state(current: CellState,
               color_a_neighbors: int,
               color_b_neighbors: int,
               params: Optional[RuleParams] = None) -> CellState:
    """Compute a cell's next state from its current state and neighbour tallies.

    Surviving cells keep their colour; newborn cells take the colour
    given by resolve_birth_state.

    Args:
        current: Current state of the cell
        color_a_neighbors: Live COLOR_A neighbors
        color_b_neighbors: Live COLOR_B neighbors
        params: Rule parameters (standard Conway when omitted)

    Returns:
        Next state of the cell
    """
    alive = current.is_alive()
    total = color_a_neighbors + color_b_neighbors

    if params is None:
        will_be_alive = update_cell(alive, total)
    else:
        will_be_alive = params.update_cell(alive, total)

    if not will_be_alive:
        return CellState.DEAD
    if alive:
        return current
    return resolve_birth_state(color_a_neighbors, color_b_neighbors)

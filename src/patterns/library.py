"""Classic Conway seed patterns.

Patterns are 2D boolean numpy arrays (True = alive) that can be painted
into a World with World.load_pattern in either colour.
"""

import numpy as np
from typing import Callable, Dict, List


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def create_beehive_pattern() -> np.ndarray:
    """Create beehive still life (6 cells)."""
    return np.array([
        [False, True, True, False],
        [True, False, False, True],
        [False, True, True, False]
    ], dtype=bool)


def create_blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells, period 2)."""
    return np.array([[True, True, True]], dtype=bool)


def create_toad_pattern() -> np.ndarray:
    """Create toad oscillator (6 cells, period 2)."""
    return np.array([
        [False, True, True, True],
        [True, True, True, False]
    ], dtype=bool)


def create_glider_pattern() -> np.ndarray:
    """Create classic glider travelling toward increasing row and column.

    Returns:
        3x3 boolean array; the pattern repeats every 4 generations shifted by (1, 1)
    """
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


PATTERN_FACTORIES: Dict[str, Callable[[], np.ndarray]] = {
    "block": create_block_pattern,
    "beehive": create_beehive_pattern,
    "blinker": create_blinker_pattern,
    "toad": create_toad_pattern,
    "glider": create_glider_pattern,
}


def available_patterns() -> List[str]:
    """Names accepted by get_pattern."""
    return sorted(PATTERN_FACTORIES)


def get_pattern(name: str) -> np.ndarray:
    """Get a fresh copy of a named pattern.

    Raises:
        ValueError: If the name is unknown
    """
    try:
        factory = PATTERN_FACTORIES[name]
    except KeyError:
        raise ValueError(f"Unknown pattern '{name}' (available: {', '.join(available_patterns())})") from None
    return factory()

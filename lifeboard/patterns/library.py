"""Classic Conway patterns and seed-function builders.

Patterns are 2D numpy bool arrays. The seed builders turn them (or a random
draw) into the (row, col) -> alive callbacks the board factories accept.
"""

import numpy as np
from typing import Optional

from ..core.board import InitialStateFn


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def create_blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells)."""
    return np.array([[True, True, True]], dtype=bool)


def create_glider_pattern() -> np.ndarray:
    """Create classic glider heading toward the lower right."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


PATTERNS = {
    "block": create_block_pattern,
    "blinker": create_blinker_pattern,
    "glider": create_glider_pattern,
}


def pattern_seed(pattern: np.ndarray, row: int = 0, col: int = 0) -> InitialStateFn:
    """Seed function placing a pattern with its top-left corner at (row, col).

    Cells outside the pattern start dead. Pattern cells that fall off the
    board are simply never asked for.

    Args:
        pattern: 2D boolean array representing the pattern
        row: Top-left row for placement
        col: Top-left column for placement

    Returns:
        Callable suitable for Board.create_bounded / create_toroidal
    """
    pattern = np.asarray(pattern, dtype=bool)
    if pattern.ndim != 2:
        raise ValueError(f"Pattern must be a 2D array, got {pattern.ndim}D")
    pattern_height, pattern_width = pattern.shape

    def seed(r: int, c: int) -> bool:
        pr, pc = r - row, c - col
        if 0 <= pr < pattern_height and 0 <= pc < pattern_width:
            return bool(pattern[pr, pc])
        return False

    return seed


def array_seed(array) -> InitialStateFn:
    """Seed function reading a full-board array (truthy = alive)."""
    return pattern_seed(array, 0, 0)


def random_seed(density: float = 0.3,
                rng: Optional[np.random.Generator] = None) -> InitialStateFn:
    """Seed function making each cell alive with the given probability.

    Args:
        density: Probability of a cell being alive (clamped to 0.0-1.0)
        rng: Random generator; a fresh default_rng() if None

    Returns:
        Callable suitable for Board.create_bounded / create_toroidal
    """
    density = max(0.0, min(1.0, density))
    rng = rng if rng is not None else np.random.default_rng()

    def seed(row: int, col: int) -> bool:
        return bool(rng.random() < density)

    return seed

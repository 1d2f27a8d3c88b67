"""Cell state transitions for Conway's Game of Life.

Each cell holds one of three states. Live and dead cells follow the classic
B3/S23 rules; the absent state marks a neighbor slot with no cell behind it
and never changes.
"""

from enum import Enum
from typing import FrozenSet


# Standard Conway rules
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

MAX_NEIGHBORS = 8


class CellState(Enum):
    """Closed set of cell states with their transition rule."""
    ALIVE = "alive"
    DEAD = "dead"
    ABSENT = "absent"

    @property
    def is_alive(self) -> bool:
        """True only for the ALIVE state."""
        return self is CellState.ALIVE

    def next_state(self, live_neighbors: int) -> 'CellState':
        """Apply Conway's rules to determine the following state.

        Args:
            live_neighbors: Number of live neighbors (0-8)

        Returns:
            State of the cell in the next generation

        Raises:
            ValueError: If live_neighbors is outside 0-8
        """
        if not 0 <= live_neighbors <= MAX_NEIGHBORS:
            raise ValueError(
                f"Live neighbor count must be between 0 and {MAX_NEIGHBORS}, got {live_neighbors}"
            )

        if self is CellState.ALIVE:
            # Survival rule
            return self if live_neighbors in SURVIVAL_SET else CellState.DEAD
        if self is CellState.DEAD:
            # Birth rule
            return CellState.ALIVE if live_neighbors in BIRTH_SET else self
        return self

    @classmethod
    def from_bool(cls, alive: bool) -> 'CellState':
        """Map a seed value onto ALIVE or DEAD."""
        return cls.ALIVE if alive else cls.DEAD

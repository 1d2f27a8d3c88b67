"""Life board: a fixed rectangular grid of wired cells.

The board owns every real cell, wires the Moore neighborhood once at
construction (bounded or toroidal), and advances generations with a
two-phase update: every cell computes its next state from the current
states, then every cell commits. No cell ever sees a neighbor's new state
within the same generation.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np

from .cell import ABSENT_CELL, Cell, set_around_cells

logger = logging.getLogger(__name__)

# Seed callback: (row, col) -> alive
InitialStateFn = Callable[[int, int], bool]


class Topology(Enum):
    """How the grid edges are connected."""
    BOUNDED = "bounded"    # Off-grid neighbors are the absent sentinel
    TOROIDAL = "toroidal"  # Rows and columns wrap around


class Board:
    """Conway's Game of Life board of height x width cells.

    Construct through create_bounded(), create_toroidal() or from_array();
    coordinates are (row, col) with the origin at the top-left.
    """

    def __init__(self, cells: List[List[Cell]], topology: Topology):
        """Wrap an already wired cell grid.

        Internal to the factory classmethods, which also wire the neighbors.

        Raises:
            ValueError: If the grid is empty or its rows differ in length
        """
        if not cells or not cells[0]:
            raise ValueError("Board needs at least one row and one column")
        if any(len(row) != len(cells[0]) for row in cells):
            raise ValueError("Board rows must all have the same length")

        self._cells = cells
        self._height = len(cells)
        self._width = len(cells[0])
        self.topology = topology
        self.generation = 0

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Created {topology.value} board {self._height}x{self._width} "
                f"with {self.live_count()} live cells"
            )

    @staticmethod
    def _build_cells(height: int, width: int,
                     initial_state_fn: Optional[InitialStateFn]) -> List[List[Cell]]:
        if height < 1 or width < 1:
            raise ValueError(f"Board dimensions must be positive, got {height}x{width}")

        return [
            [Cell(bool(initial_state_fn(row, col)) if initial_state_fn is not None else False)
             for col in range(width)]
            for row in range(height)
        ]

    @classmethod
    def create_bounded(cls, height: int, width: int,
                       initial_state_fn: Optional[InitialStateFn] = None) -> 'Board':
        """Create a board whose edges are walls.

        Args:
            height: Number of rows (>= 1)
            width: Number of columns (>= 1)
            initial_state_fn: Optional (row, col) -> alive seed; all dead if None

        Returns:
            Board: New bounded board

        Raises:
            ValueError: If dimensions are not positive
        """
        cells = cls._build_cells(height, width, initial_state_fn)

        for row in range(height):
            last_row = row == height - 1
            for col in range(width):
                last_col = col == width - 1
                first_col = col == 0
                set_around_cells(
                    cells[row][col],
                    right=ABSENT_CELL if last_col else cells[row][col + 1],
                    lower_right=ABSENT_CELL if last_row or last_col else cells[row + 1][col + 1],
                    lower=ABSENT_CELL if last_row else cells[row + 1][col],
                    lower_left=ABSENT_CELL if last_row or first_col else cells[row + 1][col - 1],
                )

        return cls(cells, Topology.BOUNDED)

    @classmethod
    def create_toroidal(cls, height: int, width: int,
                        initial_state_fn: Optional[InitialStateFn] = None) -> 'Board':
        """Create a board whose edges wrap around on both axes.

        A height or width of 1 (or 2) makes a cell adjacent to itself (or to
        the same neighbor twice); such self-adjacency is counted as is.

        Args:
            height: Number of rows (>= 1)
            width: Number of columns (>= 1)
            initial_state_fn: Optional (row, col) -> alive seed; all dead if None

        Returns:
            Board: New toroidal board

        Raises:
            ValueError: If dimensions are not positive
        """
        cells = cls._build_cells(height, width, initial_state_fn)

        for row in range(height):
            below = (row + 1) % height
            for col in range(width):
                set_around_cells(
                    cells[row][col],
                    right=cells[row][(col + 1) % width],
                    lower_right=cells[below][(col + 1) % width],
                    lower=cells[below][col],
                    lower_left=cells[below][(col - 1) % width],
                )

        return cls(cells, Topology.TOROIDAL)

    @classmethod
    def from_array(cls, array, toroidal: bool = False) -> 'Board':
        """Create a board seeded from a 2D array (truthy = alive).

        Raises:
            ValueError: If array is not two-dimensional or is empty
        """
        state = np.asarray(array, dtype=bool)
        if state.ndim != 2:
            raise ValueError(f"Initial state must be a 2D array, got {state.ndim}D")

        height, width = state.shape
        factory = cls.create_toroidal if toroidal else cls.create_bounded
        return factory(height, width, lambda row, col: state[row, col])

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"Coordinates ({row}, {col}) out of bounds for {self._height}x{self._width} board"
            )

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col) for inspecting its wiring.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return self._cells[row][col]

    def is_alive(self, row: int, col: int) -> bool:
        """Get alive status of the cell at (row, col).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return self.cell(row, col).is_alive

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell status using board[row, col] syntax."""
        row, col = key
        return self.is_alive(row, col)

    def advance_generation(self) -> None:
        """Advance every cell by one generation.

        All cells compute before any cell commits.
        """
        for row in self._cells:
            for cell in row:
                cell.compute_next()

        for row in self._cells:
            for cell in row:
                cell.commit()

        self.generation += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Generation {self.generation}: {self.live_count()} live cells")

    def advance(self, steps: int, log_interval: Optional[int] = None) -> List[int]:
        """Advance multiple generations.

        Args:
            steps: Number of generations
            log_interval: If provided, record live counts only at these intervals

        Returns:
            List of live cell counts (either all steps or at intervals)

        Raises:
            ValueError: If steps is negative or log_interval is below 1
        """
        if steps < 0:
            raise ValueError(f"Steps must be non-negative, got {steps}")
        if log_interval is not None and log_interval < 1:
            raise ValueError(f"Log interval must be at least 1, got {log_interval}")

        live_counts = []
        for step_num in range(steps):
            self.advance_generation()
            if log_interval is None or step_num % log_interval == 0:
                live_counts.append(self.live_count())

        return live_counts

    def live_count(self) -> int:
        """Count total number of alive cells."""
        return sum(1 for row in self._cells for cell in row if cell.is_alive)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not any(cell.is_alive for row in self._cells for cell in row)

    def to_array(self) -> np.ndarray:
        """Snapshot of the current generation as a (height, width) bool array."""
        return np.array([[cell.is_alive for cell in row] for row in self._cells], dtype=bool)

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        return "\n".join(
            "".join("X" if cell.is_alive else "." for cell in row)
            for row in self._cells
        )

    def __repr__(self) -> str:
        return (f"Board({self._height}x{self._width}, {self.topology.value}, "
                f"generation={self.generation}, alive={self.live_count()})")

"""Cells of the life board and their Moore-neighborhood wiring.

A cell keeps its current and next state plus eight references to the
surrounding cells. Off-grid slots point at ``ABSENT_CELL``, a shared sentinel
that is always dead and ignores writes, so neighbor counting never needs a
boundary check.
"""

from enum import IntEnum
from typing import List

from .cell_state import CellState


class Direction(IntEnum):
    """The eight Moore-neighborhood directions, in storage order."""
    UPPER_LEFT = 0
    UPPER = 1
    UPPER_RIGHT = 2
    LEFT = 3
    RIGHT = 4
    LOWER_LEFT = 5
    LOWER = 6
    LOWER_RIGHT = 7


def _neighbor_property(direction: Direction, doc: str) -> property:
    def getter(self: 'Cell') -> 'Cell':
        return self.get_neighbor(direction)

    def setter(self: 'Cell', cell: 'Cell') -> None:
        self.set_neighbor(direction, cell)

    return property(getter, setter, doc=doc)


class Cell:
    """One grid position of a life board.

    Attributes:
        current_state: State visible to neighbors during this generation
        next_state: State computed for the following generation
    """

    def __init__(self, alive: bool = False):
        """Create a cell whose neighbors are all the absent sentinel.

        Args:
            alive: Initial state of the cell
        """
        self.current_state: CellState = CellState.from_bool(alive)
        self.next_state: CellState = self.current_state
        self._neighbors: List[Cell] = [ABSENT_CELL] * len(Direction)

    @property
    def is_alive(self) -> bool:
        return self.current_state.is_alive

    def get_neighbor(self, direction: Direction) -> 'Cell':
        return self._neighbors[direction]

    def set_neighbor(self, direction: Direction, cell: 'Cell') -> None:
        """Point one neighbor relation at another cell.

        Raises:
            TypeError: If cell is not a Cell
        """
        if not isinstance(cell, Cell):
            raise TypeError(f"Neighbor must be a Cell, got {type(cell).__name__}")
        self._neighbors[direction] = cell

    def neighbors(self) -> List['Cell']:
        """All eight neighbors in Direction order."""
        return [self.get_neighbor(direction) for direction in Direction]

    upper_left = _neighbor_property(Direction.UPPER_LEFT, "Cell adjacent to the upper left.")
    upper = _neighbor_property(Direction.UPPER, "Cell directly above.")
    upper_right = _neighbor_property(Direction.UPPER_RIGHT, "Cell adjacent to the upper right.")
    left = _neighbor_property(Direction.LEFT, "Cell to the left.")
    right = _neighbor_property(Direction.RIGHT, "Cell to the right.")
    lower_left = _neighbor_property(Direction.LOWER_LEFT, "Cell adjacent to the lower left.")
    lower = _neighbor_property(Direction.LOWER, "Cell directly below.")
    lower_right = _neighbor_property(Direction.LOWER_RIGHT, "Cell adjacent to the lower right.")

    def count_live_neighbors(self) -> int:
        """Count living neighbors using their current state (0-8)."""
        return sum(1 for cell in self.neighbors() if cell.is_alive)

    def compute_next(self) -> None:
        """Compute next_state from the neighbors. current_state is untouched."""
        self.next_state = self.current_state.next_state(self.count_live_neighbors())

    def commit(self) -> None:
        """Make next_state current. compute_next() must run first on every cell."""
        self.current_state = self.next_state

    def __repr__(self) -> str:
        return f"Cell({self.current_state.value})"


class _AbsentCell(Cell):
    """Sentinel standing in for a missing neighbor.

    Every neighbor relation points back at the sentinel and writes are ignored.
    """

    def __init__(self):
        self.current_state = CellState.ABSENT
        self.next_state = CellState.ABSENT
        self._neighbors = []

    @property
    def is_alive(self) -> bool:
        return False

    def get_neighbor(self, direction: Direction) -> Cell:
        return self

    def set_neighbor(self, direction: Direction, cell: Cell) -> None:
        pass

    def count_live_neighbors(self) -> int:
        return 0

    def compute_next(self) -> None:
        pass

    def commit(self) -> None:
        pass

    def __setattr__(self, name, value):
        # State is fixed once __init__ has run
        if name in self.__dict__:
            return
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return "ABSENT_CELL"


# Process-wide sentinel shared by every bounded board
ABSENT_CELL: Cell = _AbsentCell()


def connect_right(left_cell: Cell, right_cell: Cell) -> None:
    left_cell.right = right_cell
    right_cell.left = left_cell


def connect_lower_right(upper_left_cell: Cell, lower_right_cell: Cell) -> None:
    upper_left_cell.lower_right = lower_right_cell
    lower_right_cell.upper_left = upper_left_cell


def connect_lower(upper_cell: Cell, lower_cell: Cell) -> None:
    upper_cell.lower = lower_cell
    lower_cell.upper = upper_cell


def connect_lower_left(upper_right_cell: Cell, lower_left_cell: Cell) -> None:
    upper_right_cell.lower_left = lower_left_cell
    lower_left_cell.upper_right = upper_right_cell


def set_around_cells(center: Cell,
                     right: Cell,
                     lower_right: Cell,
                     lower: Cell,
                     lower_left: Cell) -> None:
    """Wire the four forward neighbors of a cell, both ways.

    Visiting every cell of a grid once with this function populates all
    eight relations of every cell; the backward four are set by the
    reciprocal writes from the neighbors above and to the left.

    Args:
        center: Cell being wired
        right: Cell to the right of center
        lower_right: Cell below and to the right of center
        lower: Cell below center
        lower_left: Cell below and to the left of center
    """
    connect_right(center, right)
    connect_lower_right(center, lower_right)
    connect_lower(center, lower)
    connect_lower_left(center, lower_left)

"""Cellular automaton engine: cell states, wired cells and boards."""

from .cell_state import CellState, SURVIVAL_SET, BIRTH_SET
from .cell import (
    ABSENT_CELL, Cell, Direction,
    connect_right, connect_lower_right, connect_lower, connect_lower_left,
    set_around_cells,
)
from .board import Board, Topology, InitialStateFn

__all__ = [
    'CellState', 'SURVIVAL_SET', 'BIRTH_SET',
    'ABSENT_CELL', 'Cell', 'Direction',
    'connect_right', 'connect_lower_right', 'connect_lower', 'connect_lower_left',
    'set_around_cells',
    'Board', 'Topology', 'InitialStateFn',
]

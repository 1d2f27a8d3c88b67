"""Conway's Game of Life on bounded and toroidal boards."""

from .core import Board, Cell, CellState, Direction, Topology, ABSENT_CELL
from .config import BoardConfig, create_board

__version__ = "0.1.0"

__all__ = [
    'Board',
    'Cell',
    'CellState',
    'Direction',
    'Topology',
    'ABSENT_CELL',
    'BoardConfig',
    'create_board',
]

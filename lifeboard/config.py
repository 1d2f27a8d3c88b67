"""Board configuration.

Holds the dimensions and topology of a board so callers (scripts, tests)
can describe a board once and build it through a single entry point.
"""

import logging
from typing import Any, Dict, Optional, Union

from .core.board import Board, InitialStateFn, Topology

logger = logging.getLogger(__name__)


class BoardConfig:
    """Configuration for constructing a life board."""

    def __init__(self,
                 height: int,
                 width: int,
                 topology: Union[Topology, str] = Topology.BOUNDED):
        """Initialize board configuration.

        Args:
            height: Number of rows (>= 1)
            width: Number of columns (>= 1)
            topology: Topology or its name ("bounded" / "toroidal")

        Raises:
            ValueError: If dimensions are not positive or topology is unknown
        """
        if height < 1 or width < 1:
            raise ValueError(f"Board dimensions must be positive, got {height}x{width}")

        try:
            self.topology = Topology(topology)
        except ValueError:
            raise ValueError(f"Unknown topology: {topology!r}") from None

        self.height = height
        self.width = width

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BoardConfig':
        """Create configuration from a plain mapping (e.g. parsed JSON)."""
        return cls(
            height=int(data["height"]),
            width=int(data["width"]),
            topology=data.get("topology", Topology.BOUNDED.value),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "height": self.height,
            "width": self.width,
            "topology": self.topology.value,
        }

    def copy(self) -> 'BoardConfig':
        """Create a copy of the configuration."""
        return BoardConfig(self.height, self.width, self.topology)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardConfig):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"BoardConfig({self.height}x{self.width}, {self.topology.value})"


def create_board(config: BoardConfig,
                 initial_state_fn: Optional[InitialStateFn] = None) -> Board:
    """Build a board from configuration.

    Args:
        config: Board dimensions and topology
        initial_state_fn: Optional (row, col) -> alive seed

    Returns:
        Board: New board matching the configuration
    """
    logger.debug(f"Creating board from {config!r}")
    if config.topology is Topology.TOROIDAL:
        return Board.create_toroidal(config.height, config.width, initial_state_fn)
    return Board.create_bounded(config.height, config.width, initial_state_fn)

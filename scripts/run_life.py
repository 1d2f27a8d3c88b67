#!/usr/bin/env python3
"""
Game of Life Demonstration Script

Builds a bounded or toroidal board, seeds it with a classic pattern (or a
random soup) and logs every generation as text.
"""

import sys
import os
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

import numpy as np

from lifeboard.config import BoardConfig, create_board
from lifeboard.patterns import PATTERNS, pattern_seed, random_seed


def run_life(config: BoardConfig, pattern: str = "glider", row: int = 1, col: int = 1,
             density: float = 0.3, seed=None, steps: int = 10):
    """Run the simulation and return the live count history."""
    logger.info("=== GAME OF LIFE ===")
    logger.info(f"Board: {config.height}x{config.width} ({config.topology.value})")
    logger.info(f"Pattern: {pattern}, steps: {steps}")

    if pattern == "random":
        initial_state_fn = random_seed(density, np.random.default_rng(seed))
    else:
        initial_state_fn = pattern_seed(PATTERNS[pattern](), row, col)

    board = create_board(config, initial_state_fn)
    live_counts = [board.live_count()]
    logger.info(f"Generation 0: {live_counts[0]} live cells\n{board}")

    for _ in range(steps):
        board.advance_generation()
        live_counts.append(board.live_count())
        logger.info(f"Generation {board.generation}: {live_counts[-1]} live cells\n{board}")

    if board.is_empty():
        logger.info("Board died out")

    return live_counts


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Conway's Game of Life")
    parser.add_argument("--height", type=int, default=10, help="Board rows")
    parser.add_argument("--width", type=int, default=10, help="Board columns")
    parser.add_argument("--pattern", choices=sorted(PATTERNS) + ["random"], default="glider",
                        help="Seed pattern")
    parser.add_argument("--row", type=int, default=1, help="Pattern top-left row")
    parser.add_argument("--col", type=int, default=1, help="Pattern top-left column")
    parser.add_argument("--density", type=float, default=0.3, help="Alive density for random seeding")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for random seeding")
    parser.add_argument("--steps", type=int, default=10, help="Generations to run")
    parser.add_argument("--toroidal", action="store_true", help="Wrap edges around")

    args = parser.parse_args()

    try:
        config = BoardConfig(args.height, args.width, "toroidal" if args.toroidal else "bounded")
        history = run_life(
            config,
            pattern=args.pattern,
            row=args.row,
            col=args.col,
            density=args.density,
            seed=args.seed,
            steps=args.steps,
        )
        print(f"Live counts: {history}")

    except Exception as e:
        logger.error(f"Simulation failed: {e}")
        sys.exit(1)

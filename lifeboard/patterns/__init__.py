"""Seed patterns for life boards."""

from .library import (
    PATTERNS,
    create_block_pattern,
    create_blinker_pattern,
    create_glider_pattern,
    pattern_seed,
    array_seed,
    random_seed,
)

__all__ = [
    'PATTERNS',
    'create_block_pattern',
    'create_blinker_pattern',
    'create_glider_pattern',
    'pattern_seed',
    'array_seed',
    'random_seed',
]

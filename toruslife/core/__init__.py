"""Simulation engine: Conway rules and the double-buffered toroidal grid."""

from .conway_rules import SURVIVAL_SET, BIRTH_SET, update_cell, count_live_neighbors, wrap
from .grid import Grid

__all__ = [
    'Grid',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'update_cell',
    'count_live_neighbors',
    'wrap',
]

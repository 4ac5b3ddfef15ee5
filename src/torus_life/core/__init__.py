"""
Core simulation engine: Conway rules and the toroidal double-buffered grid.
"""

from .grid import LifeGrid, CellGroup
from .conway_rules import SURVIVAL_SET, BIRTH_SET, update_cell, count_live_neighbors

__all__ = [
    'LifeGrid',
    'CellGroup',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'update_cell',
    'count_live_neighbors',
]

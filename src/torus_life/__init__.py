"""
torus-life: Conway's Game of Life on a fixed-size toroidal grid

Seeds a grid from a pattern file and animates successive generations
on a text display at a fixed frame interval.
"""

from .core.grid import LifeGrid, CellGroup
from .config import SimulationConfig, DEFAULT_CONFIG
from .display import DisplayDriver, TerminalDisplay, RecordingDisplay
from .errors import (
    LifeError,
    UsageError,
    PatternLoadError,
    FileOpenError,
    ParseError,
    BoundsError,
)
from .pattern_loader import load_cell_group, parse_cell_group
from .runner import run

__version__ = "0.1.0"

__all__ = [
    'LifeGrid',
    'CellGroup',
    'SimulationConfig',
    'DEFAULT_CONFIG',
    'DisplayDriver',
    'TerminalDisplay',
    'RecordingDisplay',
    'LifeError',
    'UsageError',
    'PatternLoadError',
    'FileOpenError',
    'ParseError',
    'BoundsError',
    'load_cell_group',
    'parse_cell_group',
    'run',
]

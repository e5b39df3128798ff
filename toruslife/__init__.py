"""
toruslife: Conway's Game of Life on a toroidal grid

Loads an initial state from a text file and draws successive generations
to the terminal at a fixed frame rate.
"""

from .core.grid import Grid
from .errors import LoadError, InputFileError, EmptyInput, InvalidSymbol, RaggedInput
from .loader import parse_grid, load_grid
from .runner import RunConfig, run

__version__ = "0.1.0"

__all__ = [
    'Grid',
    'LoadError',
    'InputFileError',
    'EmptyInput',
    'InvalidSymbol',
    'RaggedInput',
    'parse_grid',
    'load_grid',
    'RunConfig',
    'run',
]

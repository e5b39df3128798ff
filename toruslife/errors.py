"""Load-time error types.

Every failure in this package happens before the simulation starts: reading
the initial-state file or parsing it into a grid. Once the run loop is going
nothing is expected to fail.
"""

from pathlib import Path
from typing import Union


class LoadError(ValueError):
    """Base class for failures while building a grid from its input."""


class InputFileError(LoadError):
    """The initial-state file could not be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read input file {self.path}: {reason}")


class EmptyInput(LoadError):
    """The input has no rows, or its first row has no cells."""

    def __init__(self, message: str = "Input contains no grid rows"):
        super().__init__(message)


class InvalidSymbol(LoadError):
    """A character other than the dead or alive symbol appeared in the input."""

    def __init__(self, symbol: str, row: int, col: int):
        self.symbol = symbol
        self.row = row
        self.col = col
        super().__init__(f"Invalid character {symbol!r} at row {row}, column {col}")


class RaggedInput(LoadError):
    """A row's length differs from the first row's."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row {row} has {actual} cells, expected {expected}")

"""Initial-state file loading.

The input format is plain text with one grid row per line. ``.`` marks a dead
cell and ``#`` a live one; nothing else is allowed. Width comes from the
first line, height from the number of lines, and every row must be as wide
as the first.
"""

import numpy as np
import logging
from pathlib import Path
from typing import List, Union

from .core.grid import Grid
from .errors import EmptyInput, InputFileError, InvalidSymbol, RaggedInput

logger = logging.getLogger(__name__)

DEAD_SYMBOL = '.'
ALIVE_SYMBOL = '#'

_SYMBOLS = {DEAD_SYMBOL: False, ALIVE_SYMBOL: True}


def split_rows(content: str) -> List[str]:
    """Split text into rows on LF only.

    One trailing CR is stripped from each row and a single trailing newline
    does not produce an extra row. Other line-break characters (form feed,
    lone CR, U+2028 ...) stay in the row and are rejected as invalid symbols.
    """
    rows = content.split("\n")
    if rows[-1] == "":
        rows.pop()
    return [row[:-1] if row.endswith("\r") else row for row in rows]


def parse_grid(content: str) -> Grid:
    """Build a grid from initial-state text.

    Args:
        content: Raw file contents

    Returns:
        Grid whose current and staging buffers both hold the parsed state

    Raises:
        EmptyInput: If there are no lines or the first line is empty
        RaggedInput: If a row's length differs from the first row's
        InvalidSymbol: If a character is neither '.' nor '#'
    """
    lines = split_rows(content)
    if not lines:
        raise EmptyInput()

    height = len(lines)
    width = len(lines[0])
    if width == 0:
        raise EmptyInput("First row of input is empty")

    cells = np.zeros(width * height, dtype=bool)

    for row, line in enumerate(lines):
        if len(line) != width:
            raise RaggedInput(row, width, len(line))

        for col, symbol in enumerate(line):
            try:
                cells[row * width + col] = _SYMBOLS[symbol]
            except KeyError:
                raise InvalidSymbol(symbol, row, col) from None

    return Grid(width, height, cells)


def load_grid(path: Union[str, Path]) -> Grid:
    """Read an initial-state file and parse it into a grid.

    Raises:
        InputFileError: If the file is missing or unreadable
        LoadError: Any parse failure from parse_grid()
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(path, str(e)) from e

    grid = parse_grid(content)
    logger.info(f"Loaded {grid.width}x{grid.height} grid from {path} ({grid.count_alive()} live cells)")
    return grid

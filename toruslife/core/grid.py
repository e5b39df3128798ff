"""Double-buffered toroidal grid for Conway's Game of Life.

The grid holds two flat, row-major numpy boolean buffers. ``cells`` is the
current generation; ``next_cells`` receives the generation being computed.
After every step the two buffers trade places, so no cell data is copied
between generations.
"""

import numpy as np
from typing import Optional, Tuple
import logging
from .conway_rules import update_cell, count_live_neighbors, wrap

logger = logging.getLogger(__name__)

BUFFERS = ("current", "next")


class Grid:
    """Toroidal Game of Life grid with a current and a staging buffer.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        cells: 1D numpy boolean array holding the current generation
        next_cells: 1D numpy boolean array the next generation is written into
        generation: Number of completed advance() calls
    """

    def __init__(self, width: int, height: int, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            initial_state: Optional boolean array, either flat row-major of
                length width * height or 2D of shape (height, width)

        Raises:
            ValueError: If dimensions are invalid or initial_state doesn't fit
        """
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be positive")

        self.width = width
        self.height = height
        self.generation = 0

        if initial_state is not None:
            initial_state = np.asarray(initial_state)
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            if initial_state.shape not in ((height, width), (width * height,)):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(height, width)}")
            self.cells = initial_state.reshape(-1).copy()
        else:
            self.cells = np.zeros(width * height, dtype=bool)

        self.next_cells = self.cells.copy()

        logger.debug(f"Created grid {width}x{height} with {self.count_alive()} live cells")

    def index(self, col: int, row: int) -> int:
        """Row-major buffer index of (col, row) after toroidal wrapping."""
        return wrap(row, self.height) * self.width + wrap(col, self.width)

    def get(self, col: int, row: int) -> bool:
        """Get current state of a cell; coordinates wrap around the edges."""
        return bool(self.cells[self.index(col, row)])

    def set(self, col: int, row: int, alive: bool) -> None:
        """Set current state of a cell; coordinates wrap around the edges."""
        self.cells[self.index(col, row)] = alive

    def neighbor_count(self, col: int, row: int) -> int:
        """Count live Moore neighbors of (col, row) in the current buffer.

        Returns:
            Number of live neighbors (0-8)
        """
        return count_live_neighbors(self.cells, self.width, self.height, col, row)

    def advance(self) -> None:
        """Compute the next generation and make it current.

        Every cell is evaluated against ``cells`` and written to
        ``next_cells``; ``cells`` is left untouched until the pass is over.
        The buffers are then swapped, leaving the previous generation in
        ``next_cells``.
        """
        current = self.cells
        staged = self.next_cells
        width = self.width

        for row in range(self.height):
            for col in range(width):
                neighbors = count_live_neighbors(current, width, self.height, col, row)
                staged[row * width + col] = update_cell(bool(current[row * width + col]), neighbors)

        self.cells, self.next_cells = staged, current
        self.generation += 1

        logger.debug(f"Generation {self.generation}: {self.count_alive()} live cells")

    def buffer(self, which: str = "current") -> np.ndarray:
        """Return the named buffer ("current" or "next") without copying."""
        if which == "current":
            return self.cells
        if which == "next":
            return self.next_cells
        raise ValueError(f"Unknown buffer {which!r}, expected one of {BUFFERS}")

    def render(self, buffer: str = "current", alive_glyph: str = "#", dead_glyph: str = " ") -> str:
        """Render a buffer as text, one line per row.

        Args:
            buffer: "current" for the live generation, "next" for the staging buffer
            alive_glyph: Character drawn for live cells
            dead_glyph: Character drawn for dead cells

        Returns:
            ``height`` lines of ``width`` characters joined by newlines

        Raises:
            ValueError: If the buffer name is unknown or a glyph isn't one character
        """
        if len(alive_glyph) != 1 or len(dead_glyph) != 1:
            raise ValueError("Glyphs must be single characters")

        glyphs = np.where(self.buffer(buffer), alive_glyph, dead_glyph).reshape(self.height, self.width)
        return "\n".join("".join(line) for line in glyphs)

    def count_alive(self) -> int:
        """Count live cells in the current generation."""
        return int(np.count_nonzero(self.cells))

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid's current generation."""
        return Grid(self.width, self.height, self.cells)

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[col, row] syntax."""
        col, row = key
        return self.get(col, row)

    def __setitem__(self, key: Tuple[int, int], value: bool) -> None:
        """Set cell state using grid[col, row] = value syntax."""
        col, row = key
        self.set(col, row, value)

    def __eq__(self, other: object) -> bool:
        """Grids are equal when their shape and current generation match."""
        if not isinstance(other, Grid):
            return False
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        return self.render(dead_glyph=".")

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, alive={self.count_alive()}, generation={self.generation})"

"""
Conway's Game of Life Rules

Birth/survival thresholds and the toroidal Moore-neighborhood count used by
the grid simulator. The rule set is fixed: B3/S23.
"""

from typing import FrozenSet, TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

# Moore neighborhood offsets, center excluded
NEIGHBOR_OFFSETS = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    return live_neighbors in BIRTH_SET


def wrap(coord: int, size: int) -> int:
    """Wrap a coordinate onto a torus axis of the given size."""
    return ((coord % size) + size) % size


def count_live_neighbors(cells: 'np.ndarray', width: int, height: int,
                         col: int, row: int) -> int:
    """Count live neighbors of cell at (col, row) in a flat row-major buffer.

    Args:
        cells: 1D boolean numpy array of length width * height
        width: Grid width in cells
        height: Grid height in cells
        col: Cell column
        row: Cell row

    Returns:
        Number of live neighbors (0-8)
    """
    count = 0

    for dx, dy in NEIGHBOR_OFFSETS:
        nx = wrap(col + dx, width)
        ny = wrap(row + dy, height)

        if cells[ny * width + nx]:
            count += 1

    return count

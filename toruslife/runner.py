"""Terminal run loop.

Draws the current generation, advances the grid and sleeps, forever. There
is no generation limit and no input handling; the loop ends only when the
process is interrupted from outside.
"""

import sys
import time
import logging
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .core.grid import Grid

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"  # erase display, cursor home


@dataclass
class RunConfig:
    """Settings for the run loop."""

    interval: float = 0.1  # Seconds between frames
    alive_glyph: str = "#"
    dead_glyph: str = " "
    clear_sequence: str = CLEAR_SCREEN
    show_next: bool = False  # Draw the staging buffer instead of the current one

    def __post_init__(self):
        if self.interval < 0:
            raise ValueError("interval must be non-negative")
        if len(self.alive_glyph) != 1 or len(self.dead_glyph) != 1:
            raise ValueError("Glyphs must be single characters")


def clear_screen(stream: TextIO, sequence: str = CLEAR_SCREEN) -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    stream.write(sequence)


def draw_frame(grid: Grid, stream: TextIO, config: RunConfig) -> None:
    """Clear the screen and write one rendered generation."""
    clear_screen(stream, config.clear_sequence)
    buffer = "next" if config.show_next else "current"
    frame = grid.render(buffer, config.alive_glyph, config.dead_glyph)
    stream.write(frame + "\n")
    stream.flush()


def run(grid: Grid,
        config: Optional[RunConfig] = None,
        stream: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep) -> None:
    """Render, advance and sleep until the process is interrupted.

    Args:
        grid: Grid to simulate (advanced in place)
        config: Loop settings, defaults to RunConfig()
        stream: Output stream, defaults to sys.stdout
        sleep: Blocking delay function called once per frame
    """
    if config is None:
        config = RunConfig()
    if stream is None:
        stream = sys.stdout

    logger.info(f"Starting run loop on {grid.width}x{grid.height} grid, interval {config.interval}s")

    while True:
        draw_frame(grid, stream, config)
        grid.advance()
        sleep(config.interval)

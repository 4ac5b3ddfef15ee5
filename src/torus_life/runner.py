"""Presentation loop that paces the simulation."""

import time
from typing import Callable
import logging

from .config import DEFAULT_CONFIG
from .core.grid import LifeGrid
from .display import DisplayDriver

logger = logging.getLogger(__name__)


def run(grid: LifeGrid,
        display: DisplayDriver,
        delay: float = DEFAULT_CONFIG.delay_seconds,
        sleep: Callable[[float], None] = time.sleep) -> None:
    """Render and advance the grid forever.

    Each cycle clears the display, writes the current generation, steps
    the grid and waits ``delay`` seconds. There is no exit condition; the
    loop ends only when the display, the sleep or the process raises.

    Args:
        grid: Seeded grid to animate
        display: Target for rendered frames
        delay: Pause between generations in seconds
        sleep: Blocking wait function
    """
    logger.info(f"Starting simulation on {grid!r} with {delay:.3f}s frame delay")

    while True:
        display.clear()
        display.write(grid.advance())
        sleep(delay)

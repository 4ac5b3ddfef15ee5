"""Grid engine for Conway's Game of Life on a fixed-size torus.

The grid keeps two flat numpy boolean buffers of length height * width,
indexed by ``row * width + col``. ``update`` fills the scratch buffer from
the current one, swaps them and clears the new scratch buffer, so every
generation is computed from a consistent snapshot of the previous one.
"""

import numpy as np
from typing import Iterable, List, Tuple
import logging

from .conway_rules import count_live_neighbors, update_cell

logger = logging.getLogger(__name__)

CellGroup = List[Tuple[int, int]]

ALIVE_CHAR = '*'
DEAD_CHAR = ' '
CORNER_CHAR = 'x'
HORIZONTAL_CHAR = '-'
VERTICAL_CHAR = '|'


class LifeGrid:
    """Toroidal Game of Life grid with double-buffered state.

    Attributes:
        height: Number of rows
        width: Number of columns
        generation: Number of updates applied since construction
    """

    def __init__(self, height: int, width: int,
                 alive_char: str = ALIVE_CHAR, dead_char: str = DEAD_CHAR):
        """Initialize an all-dead grid.

        Args:
            height: Grid height in cells (rows)
            width: Grid width in cells (columns)
            alive_char: Glyph rendered for live cells
            dead_char: Glyph rendered for dead cells

        Raises:
            ValueError: If dimensions are not positive
        """
        if height < 1 or width < 1:
            raise ValueError("Grid dimensions must be positive")

        self.height = height
        self.width = width
        self.alive_char = alive_char
        self.dead_char = dead_char
        self.generation = 0

        self._current = np.zeros(height * width, dtype=bool)
        self._next = np.zeros(height * width, dtype=bool)

        logger.debug(f"Created life grid {height}x{width}")

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.height}x{self.width} grid")
        return row * self.width + col

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set state of a single cell in the current generation.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._current[self._index(row, col)] = alive

    def set_cell_group(self, group: Iterable[Tuple[int, int]], alive: bool) -> None:
        """Set every cell of a group to the same state."""
        for row, col in group:
            self.set_cell(row, col, alive)

    def get_cell(self, row: int, col: int) -> bool:
        """Get state of a single cell in the current generation.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return bool(self._current[self._index(row, col)])

    def clear(self) -> None:
        """Reset both buffers to all dead."""
        self._current.fill(False)
        self._next.fill(False)

    def count_neighbors(self, row: int, col: int) -> int:
        """Count live cells in the wrapped Moore neighborhood of (row, col).

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._index(row, col)
        return count_live_neighbors(self._current, self.height, self.width, row, col)

    def update(self) -> None:
        """Advance the grid by one generation.

        All cells are computed against the current buffer before the
        buffers are swapped.
        """
        for row in range(self.height):
            for col in range(self.width):
                index = row * self.width + col
                neighbors = self.count_neighbors(row, col)
                self._next[index] = update_cell(self._current[index], neighbors)

        self._current, self._next = self._next, self._current
        self._next.fill(False)
        self.generation += 1

        logger.debug(f"Generation {self.generation}: {self.count_alive()} live cells")

    def render(self) -> str:
        """Render the current generation as a bordered text frame.

        Returns:
            Frame text, one line per row plus top and bottom borders,
            each line terminated by a newline
        """
        border = CORNER_CHAR + HORIZONTAL_CHAR * self.width + CORNER_CHAR
        cells = self._current.reshape(self.height, self.width)

        lines = [border]
        for row in cells:
            body = ''.join(self.alive_char if alive else self.dead_char for alive in row)
            lines.append(VERTICAL_CHAR + body + VERTICAL_CHAR)
        lines.append(border)

        return '\n'.join(lines) + '\n'

    def advance(self) -> str:
        """Render the current generation, then step to the next one.

        Returns:
            The frame of the generation that was current on entry
        """
        frame = self.render()
        self.update()
        return frame

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self._current))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self._current)

    def live_cells(self) -> CellGroup:
        """Get coordinates of all live cells in row-major order."""
        return [(int(index) // self.width, int(index) % self.width)
                for index in np.flatnonzero(self._current)]

    def to_array(self) -> np.ndarray:
        """Get current generation as a (height, width) numpy array copy."""
        return self._current.reshape(self.height, self.width).copy()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (f"LifeGrid({self.height}x{self.width}, generation={self.generation}, "
                f"alive={self.count_alive()})")

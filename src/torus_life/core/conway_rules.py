"""
Conway's Game of Life Rules

The B3/S23 transition rule and toroidal neighbor counting for the
flat cell buffers used by LifeGrid. No alternative rule sets are
supported.
"""

from typing import FrozenSet, TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

# Moore neighborhood offsets (dr, dc), center excluded
NEIGHBOR_OFFSETS = tuple(
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if not (dr == 0 and dc == 0)
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
    else:
        return live_neighbors in BIRTH_SET


def count_live_neighbors(state: 'np.ndarray', height: int, width: int,
                         row: int, col: int) -> int:
    """Count live neighbors of cell (row, col) on a toroidal grid.

    Args:
        state: Flat boolean buffer of length height * width
        height: Grid height (rows)
        width: Grid width (columns)
        row: Cell row
        col: Cell column

    Returns:
        Number of live neighbors (0-8)
    """
    count = 0

    for dr, dc in NEIGHBOR_OFFSETS:
        # Edges wrap to the opposite side
        nr = (row + dr + height) % height
        nc = (col + dc + width) % width

        if state[nr * width + nc]:
            count += 1

    return count


def get_rule_table() -> dict:
    """Get the rule outcome for every (alive, neighbor_count) pair.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {(alive, neighbors): update_cell(alive, neighbors)
            for alive in (False, True)
            for neighbors in range(9)}

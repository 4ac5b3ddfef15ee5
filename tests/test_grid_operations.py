"""Unit tests for the LifeGrid engine.

Tests construction, seeding, bounds checking, the double-buffered update
and text rendering.
"""

import pytest
import numpy as np
from torus_life.core.grid import LifeGrid


class TestGridInitialization:
    """Test grid initialization and basic properties."""

    def test_initial_state_dead(self):
        """New grid should be all dead."""
        grid = LifeGrid(20, 40)
        assert grid.is_empty()
        assert grid.count_alive() == 0
        assert grid.generation == 0
        assert grid.to_array().shape == (20, 40)

    @pytest.mark.parametrize("height, width", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_dimensions(self, height, width):
        with pytest.raises(ValueError, match="must be positive"):
            LifeGrid(height, width)

    def test_single_cell_grid(self):
        """1x1 torus: the only cell is its own eight neighbors."""
        grid = LifeGrid(1, 1)
        grid.set_cell(0, 0, True)
        assert grid.count_neighbors(0, 0) == 8


class TestGridManipulation:
    """Test seeding and bounds checking."""

    def test_set_and_get_cell(self):
        grid = LifeGrid(20, 40)

        grid.set_cell(5, 30, True)
        assert grid.get_cell(5, 30) is True
        assert grid.get_cell(6, 30) is False

        grid.set_cell(5, 30, False)
        assert grid.get_cell(5, 30) is False

    def test_row_major_layout(self):
        """(row, col) maps to row-major position, not transposed."""
        grid = LifeGrid(3, 5)
        grid.set_cell(1, 4, True)

        expected = np.zeros((3, 5), dtype=bool)
        expected[1, 4] = True
        np.testing.assert_array_equal(grid.to_array(), expected)

    def test_set_cell_group(self):
        grid = LifeGrid(20, 40)
        group = [(5, 5), (5, 6), (6, 5), (5, 5)]  # duplicate is harmless

        grid.set_cell_group(group, True)
        assert grid.count_alive() == 3
        assert grid.live_cells() == [(5, 5), (5, 6), (6, 5)]

        grid.set_cell_group([(5, 6), (6, 5)], False)
        assert grid.live_cells() == [(5, 5)]

    def test_bounds_checking(self):
        """Out-of-bounds access raises IndexError."""
        grid = LifeGrid(20, 40)

        with pytest.raises(IndexError):
            grid.set_cell(20, 0, True)

        with pytest.raises(IndexError):
            grid.set_cell(0, 40, True)

        with pytest.raises(IndexError):
            grid.set_cell(-1, 0, True)

        with pytest.raises(IndexError):
            grid.get_cell(0, -1)

        with pytest.raises(IndexError):
            grid.set_cell_group([(1, 1), (25, 5)], True)

    def test_count_neighbors_bounds_checking(self):
        """Neighbor counting fails fast instead of wrapping bad coordinates."""
        grid = LifeGrid(20, 40)

        with pytest.raises(IndexError):
            grid.count_neighbors(20, 0)

        with pytest.raises(IndexError):
            grid.count_neighbors(0, 40)

        with pytest.raises(IndexError):
            grid.count_neighbors(-1, 0)

    def test_clear_operation(self):
        """Clear resets all cells to dead."""
        grid = LifeGrid(20, 40)
        grid.set_cell_group([(0, 0), (5, 5), (19, 39)], True)
        assert grid.count_alive() == 3

        grid.clear()
        assert grid.is_empty()


class TestUpdate:
    """Double-buffered generational update."""

    def test_empty_grid_stays_empty(self):
        """No spontaneous life."""
        grid = LifeGrid(20, 40)
        grid.update()
        assert grid.is_empty()
        assert grid.generation == 1

    def test_update_is_synchronous(self):
        """Cells are computed from the previous generation only.

        An in-place sweep would let the newly born cell at (5, 5) feed
        later cells; the synchronous result is the vertical blinker.
        """
        grid = LifeGrid(20, 40)
        grid.set_cell_group([(5, 4), (5, 5), (5, 6)], True)

        grid.update()
        assert grid.live_cells() == [(4, 5), (5, 5), (6, 5)]

    def test_buffers_swap_without_copy(self):
        grid = LifeGrid(8, 8)
        current, scratch = grid._current, grid._next

        grid.update()
        assert grid._current is scratch
        assert grid._next is current

    def test_scratch_buffer_cleared_after_swap(self):
        grid = LifeGrid(8, 8)
        grid.set_cell_group([(1, 1), (1, 2), (2, 1), (2, 2)], True)

        for _ in range(3):
            grid.update()
            assert not grid._next.any()
            assert grid.count_alive() == 4

    def test_clear_resets_scratch_buffer(self):
        grid = LifeGrid(8, 8)
        grid._next.fill(True)
        grid.clear()
        assert not grid._next.any()
        assert grid.is_empty()


class TestRender:
    """Text snapshot of the current generation."""

    def test_cleared_grid_frame(self):
        height, width = 20, 40
        grid = LifeGrid(height, width)

        lines = grid.render().splitlines()
        assert len(lines) == height + 2

        border = 'x' + '-' * width + 'x'
        assert lines[0] == border
        assert lines[-1] == border

        for line in lines[1:-1]:
            assert len(line) == width + 2
            assert line[0] == '|' and line[-1] == '|'
            assert line[1:-1] == ' ' * width

    def test_live_cells_rendered(self):
        grid = LifeGrid(2, 3)
        grid.set_cell_group([(0, 0), (1, 2)], True)

        assert grid.render() == (
            "x---x\n"
            "|*  |\n"
            "|  *|\n"
            "x---x\n"
        )

    def test_custom_glyphs(self):
        grid = LifeGrid(1, 2, alive_char='#', dead_char='.')
        grid.set_cell(0, 1, True)
        assert grid.render().splitlines()[1] == '|.#|'

    def test_render_is_pure(self):
        grid = LifeGrid(5, 5)
        grid.set_cell_group([(2, 1), (2, 2), (2, 3)], True)

        first = grid.render()
        assert grid.render() == first
        assert grid.generation == 0
        assert str(grid) == first


class TestAdvance:
    """Render-then-update step used by the presentation loop."""

    def test_returns_pre_update_frame(self):
        grid = LifeGrid(5, 5)
        grid.set_cell_group([(2, 1), (2, 2), (2, 3)], True)
        before = grid.render()

        frame = grid.advance()

        assert frame == before
        assert grid.generation == 1
        assert grid.live_cells() == [(1, 2), (2, 2), (3, 2)]

    def test_repr(self):
        grid = LifeGrid(20, 40)
        grid.set_cell(0, 0, True)
        assert repr(grid) == "LifeGrid(20x40, generation=0, alive=1)"

import numpy as np

from life import CellPopulation
from life_display import (
    ALL_DEAD,
    CLEAR_SCREEN,
    VIEW_RADIUS,
    draw_viewport,
    format_alive_cells,
    format_life_106,
    viewport_grid,
)

EMPTY_ROW = "  " * 25 + " |"
EMPTY_AXIS = "--" * 51 + " 25"


def seeded(*cells):
    population = CellPopulation()
    for x, y in cells:
        population.add_alive_cell(x, y)
    return population


def row_line(lines, y):
    # lines[0] is the header; the top row is y = +25
    return lines[1 + VIEW_RADIUS - y]


def test_viewport_grid_places_cells_and_clips_window():
    grid = viewport_grid(seeded((0, 0), (25, 25), (-25, -25), (26, 0), (0, -100)))
    assert grid.shape == (51, 51)
    assert grid.dtype == np.int8
    assert grid[25, 25] == 1
    assert grid[0, 50] == 1
    assert grid[50, 0] == 1
    assert int(grid.sum()) == 3


def test_empty_viewport():
    lines = draw_viewport(CellPopulation(), clear=False).splitlines()
    assert len(lines) == 52
    assert lines[0] == "  " * 25 + " 25"
    assert row_line(lines, 0) == EMPTY_AXIS
    assert row_line(lines, 25) == EMPTY_ROW
    assert row_line(lines, -25) == EMPTY_ROW


def test_viewport_clears_the_screen_by_default():
    text = draw_viewport(CellPopulation())
    assert text.startswith(CLEAR_SCREEN + "  " * 25 + " 25\n")


def test_cell_at_origin_replaces_the_axis():
    lines = draw_viewport(seeded((0, 0)), clear=False).splitlines()
    assert row_line(lines, 0) == "--" * 25 + "-*" + "--" * 25 + " 25"


def test_cell_right_of_the_axis():
    lines = draw_viewport(seeded((3, 2)), clear=False).splitlines()
    assert row_line(lines, 2) == "  " * 25 + " |" + "  " * 2 + " *"
    assert row_line(lines, 1) == EMPTY_ROW


def test_cell_left_of_the_axis_still_draws_the_axis():
    lines = draw_viewport(seeded((-25, 5)), clear=False).splitlines()
    assert row_line(lines, 5) == " *" + "  " * 24 + " |"


def test_cells_on_both_sides_of_the_axis():
    lines = draw_viewport(seeded((-1, -3), (1, -3)), clear=False).splitlines()
    assert row_line(lines, -3) == "  " * 24 + " * | *"


def test_cells_on_the_x_axis_use_dashes():
    lines = draw_viewport(seeded((-2, 0), (2, 0)), clear=False).splitlines()
    assert row_line(lines, 0) == (
        "--" * 23 + "-*" + "--" + "-|" + "--" + "-*" + "--" * 23 + " 25"
    )


def test_cells_outside_the_window_are_not_drawn():
    lines = draw_viewport(seeded((26, 0), (0, 26), (-26, 3)), clear=False).splitlines()
    assert row_line(lines, 0) == EMPTY_AXIS
    assert row_line(lines, 3) == EMPTY_ROW
    assert "*" not in "".join(lines)


def test_format_alive_cells():
    population = seeded((1, 2), (0, 0))
    assert format_alive_cells(population) == "(0, 0) (1, 2) \n"


def test_format_alive_cells_when_all_dead():
    assert format_alive_cells(CellPopulation()) == "\n" + ALL_DEAD + "\n"


def test_format_life_106():
    population = seeded((1, 2), (0, 0), (-7, 2))
    assert format_life_106(population) == "#Life 1.06\n0 0\n-7 2\n1 2\n\n"


def test_format_life_106_has_no_sentinel_when_empty():
    assert format_life_106(CellPopulation()) == "#Life 1.06\n\n"
    assert format_life_106(CellPopulation(), clear=True).startswith(CLEAR_SCREEN + "#Life 1.06")

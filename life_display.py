"""
Text output for the Life engine: the bounded ASCII viewport and the two
alive-cell listings (human-readable and Life 1.06).

The viewport is a fixed window of VIEW_RADIUS cells on each side of the
origin. Every cell takes two characters; the y axis runs down column zero
and the x axis along row zero, both labelled with the radius at their far
ends. Alive cells are "*"; empty cells are blank, or "-" on the x axis.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from life import CellPopulation
from life_seed import LIFE_106_HEADER

VIEW_RADIUS: int = 25

CLEAR_SCREEN = "\033[2J\033[1;1H"
ALL_DEAD = "All cells are dead."


# ═══════════════════════════════════════════════════════════════════════
#  Viewport
# ═══════════════════════════════════════════════════════════════════════

def viewport_grid(
    population: CellPopulation, radius: int = VIEW_RADIUS
) -> NDArray[np.int8]:
    """Rasterise the window [-radius, radius]² into a (2r+1)×(2r+1) int8 grid.

    Row 0 of the grid is y = +radius; column 0 is x = -radius.
    """
    side = 2 * radius + 1
    grid: NDArray[np.int8] = np.zeros((side, side), dtype=np.int8)
    for y in population.rows(-radius, radius):
        xs = population.columns(y, -radius, radius)
        grid[radius - y, np.asarray(xs, dtype=np.int64) + radius] = 1
    return grid


def _draw_row(alive: NDArray[np.int8], y: int, radius: int) -> str:
    fill = "-" if y == 0 else " "
    side = 2 * radius + 1

    if not alive.any():
        if y == 0:
            return "--" * side + f" {radius}"
        return "  " * radius + " |"

    cells = np.where(alive.astype(bool), fill + "*", fill + fill)
    if not alive[radius]:
        cells[radius] = fill + "|"

    if y == 0:
        return "".join(cells.tolist()) + f" {radius}"

    # Stop after the last alive cell, but never before the y axis.
    last = max(int(np.flatnonzero(alive)[-1]), radius)
    return "".join(cells[: last + 1].tolist())


def draw_viewport(
    population: CellPopulation,
    clear: bool = True,
    radius: int = VIEW_RADIUS,
) -> str:
    """Render the window around the origin, top row first.

    Cells outside the window are not drawn.
    """
    grid = viewport_grid(population, radius)

    header = "  " * radius + f" {radius}"
    if clear:
        header = CLEAR_SCREEN + header

    lines = [header]
    for i in range(grid.shape[0]):
        lines.append(_draw_row(grid[i], radius - i, radius))
    return "\n".join(lines) + "\n"


# ═══════════════════════════════════════════════════════════════════════
#  Listings
# ═══════════════════════════════════════════════════════════════════════

def format_alive_cells(population: CellPopulation) -> str:
    """Every alive cell as "(x, y) " on a single line, or the all-dead notice."""
    text = "".join(f"({x}, {y}) " for x, y in population.alive_cells()) + "\n"
    if len(population) == 0:
        text += ALL_DEAD + "\n"
    return text


def format_life_106(population: CellPopulation, clear: bool = False) -> str:
    """Life 1.06 listing: header, then one "x y" line per alive cell."""
    body = "".join(f"{x} {y}\n" for x, y in population.alive_cells())
    text = LIFE_106_HEADER + "\n" + body + "\n"
    if clear:
        text = CLEAR_SCREEN + text
    return text

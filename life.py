"""
  Sparse Life: Conway's Game of Life on a wraparound 64-bit plane.

  Only living cells are stored. Each generation re-examines just the cells
  that were touched by the previous one (every alive cell and its eight
  neighbours), so the cost of a step depends on the active frontier rather
  than on the size of the plane.

  The plane is a torus of side 2**64: stepping past MAX_VALUE lands on
  MIN_VALUE and vice versa, on each axis independently.

  The population engine lives here. Seeding, drawing and the interactive
  driver are in life_seed.py, life_display.py and life_game.py.
"""

from __future__ import annotations

from collections.abc import Iterator

# ── Coordinate range ────────────────────────────────────────────────────
MIN_VALUE: int = -(2 ** 63)
MAX_VALUE: int = 2 ** 63 - 1

Cell = tuple[int, int]
Grid = dict[int, set[int]]  # row (y) -> alive columns (x)

# ── Pattern library ─────────────────────────────────────────────────────
# Offsets are (row, col) with rows counting downwards, as patterns are
# usually drawn. place_pattern() maps them onto the y-up plane.
PATTERNS: dict[str, list[tuple[int, int]]] = {
    "block": [(0, 0), (0, 1), (1, 0), (1, 1)],
    "blinker": [(0, 0), (0, 1), (0, 2)],
    "glider": [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
    "lwss": [
        (0, 1), (0, 4), (1, 0), (2, 0), (2, 4),
        (3, 0), (3, 1), (3, 2), (3, 3),
    ],
    "r_pentomino": [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
    "acorn": [(0, 1), (1, 3), (2, 0), (2, 1), (2, 4), (2, 5), (2, 6)],
    "diehard": [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
    "gosper_gun": [
        (0, 24),
        (1, 22), (1, 24),
        (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
        (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
        (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
        (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
        (6, 10), (6, 16), (6, 24),
        (7, 11), (7, 15),
        (8, 12), (8, 13),
    ],
    "pulsar": [
        (0, 2), (0, 3), (0, 4), (0, 8), (0, 9), (0, 10),
        (2, 0), (2, 5), (2, 7), (2, 12),
        (3, 0), (3, 5), (3, 7), (3, 12),
        (4, 0), (4, 5), (4, 7), (4, 12),
        (5, 2), (5, 3), (5, 4), (5, 8), (5, 9), (5, 10),
        (7, 2), (7, 3), (7, 4), (7, 8), (7, 9), (7, 10),
        (8, 0), (8, 5), (8, 7), (8, 12),
        (9, 0), (9, 5), (9, 7), (9, 12),
        (10, 0), (10, 5), (10, 7), (10, 12),
        (12, 2), (12, 3), (12, 4), (12, 8), (12, 9), (12, 10),
    ],
    "pentadecathlon": [
        (0, 1), (1, 1), (2, 0), (2, 2), (3, 1), (4, 1),
        (5, 1), (6, 1), (7, 0), (7, 2), (8, 1), (9, 1),
    ],
}

OSCILLATORS = ["blinker", "pulsar", "pentadecathlon"]
METHUSELAHS = ["r_pentomino", "acorn", "diehard"]


# ═══════════════════════════════════════════════════════════════════════
#  Neighbourhood
# ═══════════════════════════════════════════════════════════════════════

def neighbors(x: int, y: int) -> list[Cell]:
    """Return the eight cells around (x, y), wrapping at the range limits.

    Order is fixed: the left column top to bottom, then above and below,
    then the right column top to bottom.
    """
    prev_x = MAX_VALUE if x == MIN_VALUE else x - 1
    prev_y = MAX_VALUE if y == MIN_VALUE else y - 1
    next_x = MIN_VALUE if x == MAX_VALUE else x + 1
    next_y = MIN_VALUE if y == MAX_VALUE else y + 1

    return [
        (prev_x, next_y),
        (prev_x, y),
        (prev_x, prev_y),
        (x, next_y),
        (x, prev_y),
        (next_x, next_y),
        (next_x, y),
        (next_x, prev_y),
    ]


# ═══════════════════════════════════════════════════════════════════════
#  The population
# ═══════════════════════════════════════════════════════════════════════

class CellPopulation:
    """
    Sparse, double-buffered set of alive cells.

    Two grids alternate between the "current" role (the generation being
    built) and the "previous" role (the generation the rule reads from).
    Every insertion queues the new cell and its neighbours as candidates;
    iterate() evaluates only those candidates, so nothing outside the
    active frontier is ever looked at.
    """

    def __init__(self) -> None:
        self._grids: tuple[Grid, Grid] = ({}, {})
        self._current: int = 0  # index of the current grid in _grids
        self._candidates: list[Cell] = []
        self.generation: int = 0

    # ── Buffers ─────────────────────────────────────────────────────

    @property
    def _current_grid(self) -> Grid:
        return self._grids[self._current]

    @property
    def _previous_grid(self) -> Grid:
        return self._grids[1 - self._current]

    def _swap(self) -> None:
        self._current = 1 - self._current

    # ── Mutation ────────────────────────────────────────────────────

    def add_alive_cell(self, x: int, y: int) -> None:
        """Mark (x, y) alive in the current generation.

        Adding a cell that is already alive does nothing. Otherwise the cell
        and all eight neighbours are queued as candidates for the next
        iterate(), whether or not they are already queued.
        """
        row = self._current_grid.setdefault(y, set())
        if x in row:
            return
        row.add(x)

        self._candidates.append((x, y))
        self._candidates.extend(neighbors(x, y))

    def iterate(self) -> None:
        """Advance one generation."""
        self._swap()
        self._current_grid.clear()

        # Duplicates in the queue would give the same verdict twice.
        to_be_alive: list[Cell] = []
        for x, y in dict.fromkeys(self._candidates):
            alive = self.was_alive_in_previous_generation(x, y)
            count = self.previously_alive_neighbor_count(x, y)
            if count == 3 or (alive and count == 2):
                to_be_alive.append((x, y))

        # The births below re-queue candidates for the next generation.
        self._candidates.clear()
        for x, y in to_be_alive:
            self.add_alive_cell(x, y)

        self.generation += 1

    # ── Queries ─────────────────────────────────────────────────────

    def was_alive_in_previous_generation(self, x: int, y: int) -> bool:
        row = self._previous_grid.get(y)
        return row is not None and x in row

    def previously_alive_neighbor_count(self, x: int, y: int) -> int:
        return sum(
            self.was_alive_in_previous_generation(nx, ny)
            for nx, ny in neighbors(x, y)
        )

    def is_alive(self, x: int, y: int) -> bool:
        row = self._current_grid.get(y)
        return row is not None and x in row

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, tuple) or len(cell) != 2:
            return False
        try:
            return self.is_alive(*cell)
        except TypeError:  # unhashable coordinate
            return False

    def __len__(self) -> int:
        return sum(len(row) for row in self._current_grid.values())

    def rows(
        self,
        lo: int | None = None,
        hi: int | None = None,
        descending: bool = False,
    ) -> list[int]:
        """Rows with at least one alive cell, optionally limited to [lo, hi]."""
        ys = [
            y for y, row in self._current_grid.items()
            if row
            and (lo is None or y >= lo)
            and (hi is None or y <= hi)
        ]
        ys.sort(reverse=descending)
        return ys

    def columns(
        self, y: int, lo: int | None = None, hi: int | None = None
    ) -> list[int]:
        """Alive columns of row y in ascending order, optionally limited to [lo, hi]."""
        row = self._current_grid.get(y, ())
        return sorted(
            x for x in row
            if (lo is None or x >= lo) and (hi is None or x <= hi)
        )

    def alive_cells(self) -> Iterator[Cell]:
        """Every alive cell exactly once, rows ascending then columns ascending."""
        for y in self.rows():
            for x in self.columns(y):
                yield x, y

    @property
    def candidates(self) -> tuple[Cell, ...]:
        """Cells queued for evaluation by the next iterate(), duplicates included."""
        return tuple(self._candidates)

    @property
    def candidate_count(self) -> int:
        return len(self._candidates)

    def bounding_box(self) -> tuple[int, int, int, int] | None:
        """(min_x, max_x, min_y, max_y) of the current generation, None if empty."""
        ys = self.rows()
        if not ys:
            return None
        min_x = min(min(self._current_grid[y]) for y in ys)
        max_x = max(max(self._current_grid[y]) for y in ys)
        return min_x, max_x, ys[0], ys[-1]


# ═══════════════════════════════════════════════════════════════════════
#  Seeding helpers
# ═══════════════════════════════════════════════════════════════════════

def place_pattern(population: CellPopulation, name: str, x: int = 0, y: int = 0) -> int:
    """Seed a library pattern with its top-left corner at (x, y).

    Returns the number of cells in the pattern. Raises KeyError for an
    unknown name.
    """
    cells = PATTERNS[name]
    for row, col in cells:
        population.add_alive_cell(x + col, y - row)
    return len(cells)

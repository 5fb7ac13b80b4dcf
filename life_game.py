#!/usr/bin/env python3
"""
Interactive driver for the sparse Life engine.

Reads the starting cells, then runs a fixed number of generations, drawing
the viewport and listing the alive cells after each one. The final state is
printed as a Life 1.06 listing.

Usage:
  python3 life_game.py                        # type cells, ENTER between steps
  python3 life_game.py --seed glider.lif      # read cells from a file
  python3 life_game.py --pattern acorn -n 50 --no-prompt
  python3 life_game.py --stats life_stats.csv --export final.lif
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable
from pathlib import Path
from typing import IO, ClassVar, TextIO

from life import MAX_VALUE, MIN_VALUE, PATTERNS, CellPopulation, place_pattern
from life_display import (
    VIEW_RADIUS,
    draw_viewport,
    format_alive_cells,
    format_life_106,
)
from life_seed import SeedError, is_life_106, read_life_106, read_seed

DEFAULT_ITERATIONS: int = 10

RULE = "-" * 71

INSTRUCTIONS: list[str] = [
    RULE,
    "Please enter the alive coordinates.",
    "Enter one set of coordinates per line using the following format: "
    "<x-coordinate> <y-coordinate>",
    f"The max coordinate value is {MAX_VALUE}",
    f"The min coordinate value is {MIN_VALUE}",
    "Enter an empty line to stop entering coordinates.",
    f"Cells whose coordinates are less than {VIEW_RADIUS} units from the origin "
    "will be displayed graphically.",
    "Example:",
    "0 1",
    "1 2",
    "2 0",
    "2 1",
    "2 2",
    "-2000000000000 -2000000000000",
    "-2000000000001 -2000000000001",
    "<empty line>",
    RULE,
]


# ═══════════════════════════════════════════════════════════════════════
#  Stats logger
# ═══════════════════════════════════════════════════════════════════════

class StatsLogger:
    """Writes per-generation engine telemetry to CSV."""

    HEADER: ClassVar[str] = "gen,time_s,population,candidates,rows,event\n"

    def __init__(self, path: Path) -> None:
        self._path = path
        self._fh: IO[str] | None = None
        self._t0: float = time.monotonic()

    def open(self) -> None:
        try:
            self._fh = open(self._path, "w")
            self._fh.write(self.HEADER)
            self._fh.flush()
        except OSError as e:
            print(f"Warning: stats logging disabled: {e}", file=sys.stderr)
            self._fh = None

    def log(
        self,
        gen: int,
        pop: int,
        candidates: int,
        rows: int,
        event: str = "",
    ) -> None:
        if self._fh is None:
            return
        t = time.monotonic() - self._t0
        try:
            self._fh.write(f"{gen},{t:.3f},{pop},{candidates},{rows},{event}\n")
            # Flush on events or periodically
            if event or gen % 50 == 0:
                self._fh.flush()
        except OSError as e:
            print(f"Warning: stats logging stopped: {e}", file=sys.stderr)
            self.close()

    def close(self) -> None:
        if self._fh is not None:
            fh, self._fh = self._fh, None
            try:
                fh.close()
            except OSError as e:
                print(f"Warning: could not close stats log: {e}", file=sys.stderr)


# ═══════════════════════════════════════════════════════════════════════
#  The game
# ═══════════════════════════════════════════════════════════════════════

class GameOfLife:
    """Seeds a CellPopulation, steps it and prints each generation."""

    def __init__(
        self,
        out: TextIO | None = None,
        clear: bool = True,
        stats: StatsLogger | None = None,
    ) -> None:
        self.population = CellPopulation()
        self.out: TextIO = out if out is not None else sys.stdout
        self.clear = clear
        self.stats = stats

    def start(self, lines: Iterable[str], life_106: bool = False) -> bool:
        """Print the instructions and read the starting cells.

        Returns False if a record could not be parsed. Cells read before the
        bad record remain in the population.
        """
        for text in INSTRUCTIONS:
            print(text, file=self.out)

        try:
            if life_106:
                read_life_106(lines, self.population)
            else:
                read_seed(lines, self.population)
        except SeedError as e:
            print(f"{e.message} Terminating program.", file=self.out)
            print(f"Unable to add alive cell from string '{e.line}'.", file=self.out)
            return False

        self._log("seed")
        self.print_alive_cells()
        return True

    def run_one_iteration(self) -> None:
        was_alive = len(self.population) > 0
        self.population.iterate()
        extinct = was_alive and len(self.population) == 0
        self._log("extinct" if extinct else "")
        self.print_alive_cells()

    def print_alive_cells(self) -> None:
        self.out.write(draw_viewport(self.population, clear=self.clear))
        print("Alive Cells:", file=self.out)
        self.out.write(format_alive_cells(self.population))

    def print_final_state(self) -> None:
        self.out.write(format_life_106(self.population, clear=self.clear))

    def _log(self, event: str) -> None:
        if self.stats is None:
            return
        pop = self.population
        self.stats.log(
            gen=pop.generation,
            pop=len(pop),
            candidates=pop.candidate_count,
            rows=len(pop.rows()),
            event=event,
        )


# ═══════════════════════════════════════════════════════════════════════
#  Command line
# ═══════════════════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life on a sparse, wraparound 64-bit plane",
    )
    parser.add_argument("-n", "--iterations", type=int, default=DEFAULT_ITERATIONS,
                        help=f"Generations to run (default: {DEFAULT_ITERATIONS})")
    parser.add_argument("--no-prompt", action="store_true",
                        help="Run every generation without waiting for ENTER")
    parser.add_argument("--no-clear", action="store_true",
                        help="Do not clear the screen before each drawing")
    parser.add_argument("--seed", type=Path, default=None, metavar="FILE",
                        help="Read starting cells from FILE (plain or Life 1.06) "
                             "instead of standard input")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default=None,
                        help="Place a library pattern at the origin before seeding")
    parser.add_argument("--stats", type=Path, default=None, metavar="PATH",
                        help="Log per-generation telemetry to a CSV file")
    parser.add_argument("--export", type=Path, default=None, metavar="FILE",
                        help="Also write the final Life 1.06 listing to FILE")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.iterations < 0:
        print("Error: --iterations must not be negative", file=sys.stderr)
        return 2

    stats: StatsLogger | None = None
    if args.stats is not None:
        stats = StatsLogger(args.stats)
        stats.open()

    print("Game of Life")
    game = GameOfLife(clear=not args.no_clear, stats=stats)

    try:
        if args.pattern is not None:
            place_pattern(game.population, args.pattern)

        lines: Iterable[str]
        life_106 = False
        if args.seed is not None:
            try:
                lines = args.seed.read_text().splitlines()
            except OSError as e:
                print(f"Error: cannot read seed file {args.seed}: {e}", file=sys.stderr)
                return 1
            life_106 = bool(lines) and is_life_106(lines[0])
        elif args.pattern is not None:
            lines = []
        else:
            lines = sys.stdin

        if not game.start(lines, life_106=life_106):
            print("Unable to start game.")
            return 1

        for i in range(1, args.iterations + 1):
            if not args.no_prompt:
                print(f"\nHit <ENTER> to run iteration {i}:")
                sys.stdin.readline()
            game.run_one_iteration()

        game.print_final_state()
        print()

        if args.export is not None:
            try:
                args.export.write_text(format_life_106(game.population))
            except OSError as e:
                print(f"Error: cannot write export file {args.export}: {e}", file=sys.stderr)
                return 1
    finally:
        if stats is not None:
            stats.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())

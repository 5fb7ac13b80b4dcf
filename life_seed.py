"""Seed input for the Life engine.

Two readers share one record parser:

  read_seed      "<x> <y>" lines as typed at the prompt, ending at the first
                 empty line (or end of input).
  read_life_106  a Life 1.06 file: "#Life 1.06" header, "#" comment lines,
                 then "<x> <y>" records until end of input.

Any bad record raises SeedError. Cells read before the bad record stay in
the population; the caller is expected to abandon the run.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from life import MAX_VALUE, MIN_VALUE, CellPopulation

LIFE_106_HEADER = "#Life 1.06"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAX_DIGITS = len(str(MAX_VALUE))


class SeedError(ValueError):
    """A seed record could not be turned into a coordinate."""

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.message = message
        self.line = line


def _parse_value(token: str, axis: str, line: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise SeedError(f"Improperly formatted input '{token}'.", line)
    out_of_range = SeedError(
        f"{axis} value '{token}' is outside the range of acceptable values.",
        line,
    )
    # Anything longer than the widest 64-bit value is out of range; checked
    # before int() so huge tokens never reach the digit-count limit.
    if len(token.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        raise out_of_range
    value = int(token)
    if value > MAX_VALUE or value < MIN_VALUE:
        raise out_of_range
    return value


def parse_coordinate(line: str) -> tuple[int, int]:
    """Parse one "<x> <y>" record. Exactly one space separates the values."""
    parts = line.split(" ")
    if len(parts) != 2:
        raise SeedError(f"Improperly formatted input '{line}'.", line)
    return _parse_value(parts[0], "X", line), _parse_value(parts[1], "Y", line)


def read_seed(lines: Iterable[str], population: CellPopulation) -> int:
    """Add cells from "<x> <y>" lines until an empty line. Returns cells read."""
    count = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            break
        x, y = parse_coordinate(line)
        population.add_alive_cell(x, y)
        count += 1
    return count


def read_life_106(lines: Iterable[str], population: CellPopulation) -> int:
    """Add cells from a Life 1.06 listing. Returns cells read."""
    it = iter(lines)
    header = next(it, "").rstrip("\r\n")
    if header.strip() != LIFE_106_HEADER:
        raise SeedError(f"Missing '{LIFE_106_HEADER}' header in '{header}'.", header)

    count = 0
    for raw in it:
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        x, y = parse_coordinate(line)
        population.add_alive_cell(x, y)
        count += 1
    return count


def is_life_106(first_line: str) -> bool:
    return first_line.strip() == LIFE_106_HEADER

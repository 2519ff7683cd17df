"""The field grid: a 21 by 26 record of cell values, its file format and house placement."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path

from dronefarm.constants import GRID_COLS, GRID_ROWS
from dronefarm.widgets import Rect

GRID_LEFT = 110
GRID_BOTTOM = 470
CELL = 20
DRAWING_AREA = Rect(110, 50, 630, 470)
MAX_HOUSES = 4

FARMLAND = 1
FIRST_HOUSE = 3
LAST_HOUSE = 6

# Cells are stored row by row as 16-bit little-endian signed integers.
_CELL_FORMAT = struct.Struct("<h")
_FILE_FORMAT = struct.Struct(f"<{GRID_ROWS * GRID_COLS}h")


def _blank() -> list[list[int]]:
    return [[0] * GRID_COLS for _ in range(GRID_ROWS)]


@dataclass
class FieldGrid:
    """Cell values of a field; row 0 is the bottom of the screen."""

    cells: list[list[int]] = field(default_factory=_blank)

    def __post_init__(self) -> None:
        if len(self.cells) != GRID_ROWS or any(len(row) != GRID_COLS for row in self.cells):
            raise ValueError(f"a field grid is {GRID_ROWS} rows of {GRID_COLS} cells")

    @classmethod
    def load(cls, path: str | Path) -> "FieldGrid":
        """Read a field file; a missing or short file leaves the remaining cells 0."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            return cls()
        data = data[: _FILE_FORMAT.size]
        whole = len(data) - len(data) % _CELL_FORMAT.size
        values = [v for (v,) in _CELL_FORMAT.iter_unpack(data[:whole])]
        values.extend([0] * (GRID_ROWS * GRID_COLS - len(values)))
        return cls([values[r * GRID_COLS:(r + 1) * GRID_COLS] for r in range(GRID_ROWS)])

    def save(self, path: str | Path) -> None:
        """Write the grid in the field file format."""
        Path(path).write_bytes(_FILE_FORMAT.pack(*(v for row in self.cells for v in row)))

    def cell_at_screen(self, x: int, y: int) -> tuple[int, int]:
        """Grid (row, column) under a screen point inside the drawing area."""
        if not DRAWING_AREA.contains(x, y):
            raise ValueError(f"({x}, {y}) is outside the field")
        return (GRID_BOTTOM - y) // CELL, (x - GRID_LEFT) // CELL

    def screen_origin(self, i: int, j: int) -> tuple[int, int]:
        """Top-left screen corner of cell (i, j)."""
        self._check(i, j)
        return GRID_LEFT + j * CELL, GRID_BOTTOM - i * CELL - CELL

    def houses(self) -> list[tuple[int, int]]:
        """Positions of the houses, in grid order."""
        return [
            (i, j)
            for i, row in enumerate(self.cells)
            for j, value in enumerate(row)
            if FIRST_HOUSE <= value <= LAST_HOUSE
        ]

    def place_house(self, i: int, j: int) -> bool:
        """Build a house on farmland at (i, j); False if refused.

        At most MAX_HOUSES houses stand on a field; each new one is numbered
        after the houses already there.
        """
        self._check(i, j)
        count = len(self.houses())
        if count >= MAX_HOUSES or self.cells[i][j] != FARMLAND:
            return False
        self.cells[i][j] = FIRST_HOUSE + count
        return True

    def clear_houses(self) -> list[tuple[int, int]]:
        """Turn every house back into farmland; returns where they stood."""
        cleared = self.houses()
        for i, j in cleared:
            self.cells[i][j] = FARMLAND
        return cleared

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < GRID_ROWS and 0 <= j < GRID_COLS):
            raise IndexError(f"cell ({i}, {j}) is outside the grid")
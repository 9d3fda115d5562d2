from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from . import geometry
from .geometry import Place

DEFAULT_SIZE = 7


@dataclass
class Board:
    """Mutable state of a Galaxies puzzle on a cols x rows grid of cells.

    Cells sit at odd/odd places, edges at mixed parity and intersections at
    even/even places; (0, 0) is the bottom-left corner and (2*cols, 2*rows)
    the top-right one. A new board has only the periphery as boundaries, no
    centers, and every cell unmarked (mark 0).
    """
    cols: int = DEFAULT_SIZE
    rows: int = DEFAULT_SIZE
    boundaries: Set[Place] = field(default_factory=set, init=False, repr=False)
    _centers: List[Place] = field(default_factory=list, init=False, repr=False)
    _marks: List[int] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.init(self.cols, self.rows)

    def init(self, cols: int, rows: int) -> None:
        """Resizes the board to COLS x ROWS and clears it."""
        if cols < 1 or rows < 1:
            raise ValueError(f'bad board size {cols}x{rows}')
        self.cols = cols
        self.rows = rows
        self._marks = [0] * (cols * rows)
        self._centers = []
        self.boundaries = set()
        for y in range(1, self.ylim(), 2):
            self.boundaries.add((0, y))
            self.boundaries.add((2 * cols, y))
        for x in range(1, self.xlim(), 2):
            self.boundaries.add((x, 0))
            self.boundaries.add((x, 2 * rows))

    def clear(self) -> None:
        """Removes centers, interior boundaries and marks without resizing."""
        self.init(self.cols, self.rows)

    def copy(self) -> 'Board':
        other = Board(self.cols, self.rows)
        other.boundaries = set(self.boundaries)
        other._centers = list(self._centers)
        other._marks = list(self._marks)
        return other

    def xlim(self) -> int:
        """Number of places across a row: vertical edges plus cells."""
        return 2 * self.cols + 1

    def ylim(self) -> int:
        """Number of places up a column: horizontal edges plus cells."""
        return 2 * self.rows + 1

    def index(self, x: int, y: int) -> int:
        """Position of cell (x, y) in the row-major mark list."""
        return (y // 2) * self.cols + (x // 2)

    def cells(self) -> Iterator[Place]:
        """Iterates over all cells, bottom row first."""
        for y in range(1, self.ylim(), 2):
            for x in range(1, self.xlim(), 2):
                yield (x, y)

    # ---------- Classification ----------

    def is_cell(self, x: int, y: int) -> bool:
        return geometry.is_cell((x, y), self.cols, self.rows)

    def is_edge(self, x: int, y: int) -> bool:
        return geometry.is_edge((x, y), self.cols, self.rows)

    def is_vert(self, x: int, y: int) -> bool:
        return geometry.is_vert((x, y), self.cols, self.rows)

    def is_horiz(self, x: int, y: int) -> bool:
        return geometry.is_horiz((x, y), self.cols, self.rows)

    def is_intersection(self, x: int, y: int) -> bool:
        return geometry.is_intersection((x, y), self.cols, self.rows)

    def is_boundary(self, x: int, y: int) -> bool:
        return (x, y) in self.boundaries

    def is_center(self, x: int, y: int) -> bool:
        return (x, y) in self._centers

    def reflect(self, center: Place, p: Place) -> Optional[Place]:
        return geometry.reflect(center, p, self.cols, self.rows)

    # ---------- Setup ----------

    def toggle_boundary(self, x: int, y: int) -> None:
        """Adds or removes the boundary at edge (x, y)."""
        if not self.is_edge(x, y):
            raise ValueError(f'not an edge: ({x}, {y})')
        if (x, y) in self.boundaries:
            self.boundaries.remove((x, y))
        else:
            self.boundaries.add((x, y))

    def place_center(self, x: int, y: int) -> None:
        """Appends a center at (x, y), which may be a cell, edge or intersection."""
        if not geometry.is_on_board((x, y), self.cols, self.rows):
            raise ValueError(f'center off the board: ({x}, {y})')
        self._centers.append((x, y))

    def centers(self) -> Tuple[Place, ...]:
        """Read-only view of the centers in placement order."""
        return tuple(self._centers)

    # ---------- Marks ----------

    def mark(self, x: int, y: int) -> int:
        """Returns the mark on cell (x, y), or -1 if (x, y) is not a cell."""
        if not self.is_cell(x, y):
            return -1
        return self._marks[self.index(x, y)]

    def set_mark(self, x: int, y: int, v: int) -> None:
        """Marks cell (x, y) with V, which must be non-negative."""
        if not self.is_cell(x, y):
            raise ValueError(f'bad cell coordinates: ({x}, {y})')
        if v < 0:
            raise ValueError(f'bad mark value: {v}')
        self._marks[self.index(x, y)] = v

    def mark_all(self, cells: Iterable[Place], v: int) -> None:
        """Sets the mark of every cell in CELLS to V."""
        if v < 0:
            raise ValueError(f'bad mark value: {v}')
        for cell in cells:
            self.set_mark(*cell, v)

    def set_all_marks(self, v: int) -> None:
        """Sets the mark of every cell on the board to V."""
        if v < 0:
            raise ValueError(f'bad mark value: {v}')
        self._marks = [v] * (self.cols * self.rows)

    def marked_cells(self) -> List[Tuple[int, int, int]]:
        """(x, y, mark) for every cell with a non-zero mark."""
        return [(x, y, self.mark(x, y)) for (x, y) in self.cells() if self.mark(x, y) != 0]

    def pretty(self) -> str:
        """Renders the board one character per place, top row first."""
        lines: List[str] = []
        for y in range(self.ylim() - 1, -1, -1):
            row: List[str] = []
            for x in range(self.xlim()):
                cent = self.is_center(x, y)
                bound = self.is_boundary(x, y)
                if self.is_intersection(x, y):
                    row.append('o' if cent else ' ')
                elif self.is_cell(x, y):
                    marked = self.mark(x, y) > 0
                    if cent:
                        row.append('O' if marked else 'o')
                    else:
                        row.append('*' if marked else ' ')
                elif cent:
                    row.append('O' if bound else 'o')
                elif y % 2 == 0:
                    row.append('=' if bound else '-')
                else:
                    row.append('I' if bound else '|')
            lines.append(''.join(row))
        return '\n'.join(lines)
